"""Custom exception hierarchy for config file choice utilities."""


class CFCError(Exception):
    """Base exception for all CFC errors."""


class ConfigFileNotFoundError(CFCError):
    """Raised when a config file lookup fails."""

    def __init__(self, identifier):
        super().__init__(f"Config file not found: {identifier}")
        self.identifier = identifier


class ValidationError(CFCError):
    """Raised when parameter or document validation fails."""


class UnknownParameterTypeError(CFCError, KeyError):
    """Raised when a parameter type symbol is not registered."""

    def __init__(self, symbol):
        super().__init__(f"Unknown parameter type '{symbol}'")
        self.symbol = symbol

    def __str__(self):
        return self.args[0]


class TemplateError(CFCError):
    """Raised when template rendering fails."""


class DatabaseError(CFCError):
    """Raised when database operation fails."""


class ConnectionError(DatabaseError):
    """Raised when database connection fails."""
