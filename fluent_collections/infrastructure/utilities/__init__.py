"""Infrastructure utilities - common helpers and file/JSON utilities."""
