"""Core layer: configuration, enums, errors, result types, and container."""
