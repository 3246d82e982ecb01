"""Energy calculator use cases."""
