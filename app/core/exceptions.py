"""Exception hierarchy for the property catalog."""


class PropertyCatalogError(Exception):
    """Base exception for all property catalog errors."""


class PropertyValidationError(PropertyCatalogError):
    """Raised when property input violates one or more field rules."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid property data")


class ConfigurationError(PropertyCatalogError):
    """Raised when configuration is invalid or missing."""
