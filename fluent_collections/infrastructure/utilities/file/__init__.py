"""File utilities package - JSON encoding and configuration file reading."""
