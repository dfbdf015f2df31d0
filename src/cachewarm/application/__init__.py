"""Application layer orchestrating cachewarm use cases."""
