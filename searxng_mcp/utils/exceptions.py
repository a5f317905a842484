"""Custom exceptions for the SearXNG MCP server."""


class SearxngMcpError(Exception):
    """Base exception for all searxng-mcp errors."""

    pass


class ConfigurationError(SearxngMcpError):
    """Raised when configuration is invalid."""

    pass


class InvalidToolError(SearxngMcpError):
    """Raised when a tool call names an unknown tool or carries no arguments."""

    pass


class InvalidArgumentsError(SearxngMcpError):
    """Raised when tool arguments fail the shape check or normalization."""

    pass


class SearchError(SearxngMcpError):
    """Raised when a search operation fails."""

    pass


class AllInstancesFailedError(SearchError):
    """Raised when every configured SearXNG instance failed to answer.

    Attributes:
        attempted_instances: Base URLs tried, in fallback order
        errors: One diagnostic per failed attempt
    """

    def __init__(
        self,
        message: str,
        attempted_instances: list[str] | None = None,
        errors: list[str] | None = None,
    ) -> None:
        """Initialize AllInstancesFailedError with context.

        Args:
            message: Human-readable error description
            attempted_instances: Instances that were tried before failing
            errors: Error messages from each failed attempt
        """
        super().__init__(message)
        self.attempted_instances = attempted_instances or []
        self.errors = errors or []
