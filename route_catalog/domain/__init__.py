"""Domain layer: catalog entities, value objects, enums, errors, and ports."""
