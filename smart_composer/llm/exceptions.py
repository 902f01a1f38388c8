"""Custom exceptions for LLM provider adapters."""


class UnsupportedOperationError(NotImplementedError):
    """Raised when a provider adapter does not implement an operation."""

    def __init__(self, operation: str, provider: str, message: str | None = None):
        self.operation = operation
        self.provider = provider
        self.message = message or f"{operation} are not supported by {provider} provider."
        super().__init__(self.message)


class UnknownProviderError(ValueError):
    """Raised when no adapter is registered for a provider type."""

    pass
