"""Custom exceptions for Brutus."""


class BrutusError(Exception):
    """Base exception for Brutus."""


class ConfigurationError(BrutusError):
    """Policy, ladder or leet-map values are invalid."""


class ResourceError(BrutusError):
    """A word list could not be read."""


class ExpansionLimitExceeded(BrutusError):
    """Leet expansion produced more variants than allowed."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Leet expansion exceeded {limit} variants")
