"""Infrastructure adapters: configuration and relational storage."""
