"""Domain layer: value objects, entities and exceptions."""
