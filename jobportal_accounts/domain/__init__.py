"""Domain layer: entities, repository and service interfaces, exceptions."""
