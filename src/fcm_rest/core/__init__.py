"""Core types shared by every fcm-rest subsystem: configuration, errors, interfaces."""
