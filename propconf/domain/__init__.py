"""Domain Layer: value objects, errors and ports of the properties provider."""
