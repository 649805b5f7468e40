"""Core infrastructure: configuration, storage, logging and errors."""
