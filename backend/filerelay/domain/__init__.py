"""Domain layer: file registry entities, contracts and errors."""
