"""Infrastructure layer: configuration and dependency wiring."""
