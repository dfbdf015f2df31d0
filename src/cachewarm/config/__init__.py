"""Configuration package for cachewarm."""
