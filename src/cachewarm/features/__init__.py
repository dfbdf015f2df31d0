"""Feature packages for cachewarm."""
