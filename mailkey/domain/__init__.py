"""Domain layer: value objects and their exceptions."""
