"""Infrastructure layer (persistence)."""
