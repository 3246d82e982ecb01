"""Food recommendation use cases."""
