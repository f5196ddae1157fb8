"""Infrastructure layer: logging adapters and descriptor sources."""
