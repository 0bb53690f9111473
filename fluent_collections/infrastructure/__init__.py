"""Infrastructure layer - utilities backing the domain types."""
