"""Application layer: orchestrators coordinating domain services."""
