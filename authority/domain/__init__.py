"""Domain layer: value objects, cache interface and discovery services."""
