#!/usr/bin/env python3
"""fcm-rest quickstart.

Demonstrates the core workflow against an in-memory transport, so it
runs without Google credentials or network access:

1. Create a client with a static token and canned responses.
2. Send a silent iOS background message to a topic.
3. Subscribe a batch of tokens to the topic.
4. Inspect a failed request.

To talk to the real APIs, use ``FCMClient.from_env()`` with Application
Default Credentials and ``GOOGLE_CLOUD_PROJECT`` set.

Run:
    python examples/quickstart.py
"""
from __future__ import annotations

import asyncio
import logging

from fcm_rest import (
    ApnsConfig,
    CannedResponse,
    FCMClient,
    FCMClientConfig,
    FCMError,
    InMemoryTransport,
    Notification,
    StaticTokenProvider,
    TopicMessage,
)


async def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    # -- Step 1: Create the client -------------------------------------------
    transport = InMemoryTransport(
        CannedResponse(200, b'{"name": "projects/demo/messages/0:1500415314455276"}'),
        CannedResponse(200, b'{"results": [{}, {"error": "INVALID_ARGUMENT"}]}'),
        CannedResponse(400, b'{"error": {"status": "INVALID_ARGUMENT"}}'),
    )
    client = FCMClient(
        FCMClientConfig(project_id="demo"),
        token_provider=StaticTokenProvider("ya29.example"),
        transport=transport,
    )
    print("[1] Client created for project: demo")

    async with client:
        # -- Step 2: Send a background message -------------------------------
        message = TopicMessage(
            topic="background_channel",
            notification=Notification(title="example"),
            apns=ApnsConfig.ios_background_notification({"message": "Hello, World!"}),
        )
        output = await client.send(message)
        print(f"[2] Message sent: {output.name}")
        print(f"    body: {transport.last_request.body.decode()}")

        # -- Step 3: Subscribe tokens ----------------------------------------
        response = await client.register_tokens_to_topic("news", ["token_0", "token_1"])
        print(f"[3] Subscription results: {response.errors}")

        # -- Step 4: Handle a failure ----------------------------------------
        try:
            await client.validate(TopicMessage(topic="bad topic"))
        except FCMError as exc:
            print(f"[4] Validation failed: [{exc.code}] {exc.message}")
            print(f"    cause: {exc.__cause__!r}")


if __name__ == "__main__":
    asyncio.run(main())
