"""Core infrastructure: configuration, logging and storage."""
