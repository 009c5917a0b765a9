"""Comment use cases."""
