"""Post use cases."""
