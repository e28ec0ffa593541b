"""
Application errors for clean API error handling.

Request-level errors (QueryValidationError, ProviderError) are mapped to JSON
responses by the exception handlers in advogamos.api.handlers.
ConfigurationError is fatal at startup.
"""

QUERY_REQUIRED_MESSAGE = "Query é obrigatória"
PROCESSING_FAILED_MESSAGE = "Erro ao processar consulta"


class QueryValidationError(Exception):
    """Raised when the search request carries no usable query."""

    def __init__(self, message: str = QUERY_REQUIRED_MESSAGE) -> None:
        self.message = message
        super().__init__(message)


class ProviderError(Exception):
    """Raised when the completion provider call fails or returns an unusable response.

    The underlying SDK/network exception, if any, is chained as __cause__.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    @property
    def origin(self) -> BaseException:
        """The exception that actually failed: the chained cause, or this error itself."""
        return self.__cause__ or self


class ConfigurationError(Exception):
    """Raised when required configuration (e.g. ANTHROPIC_API_KEY) is missing or invalid."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
