"""Core infrastructure: settings, logging and storage."""
