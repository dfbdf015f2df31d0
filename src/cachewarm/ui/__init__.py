"""User interfaces for cachewarm."""
