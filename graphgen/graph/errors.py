"""Exception taxonomy shared by all graph generators."""


class InvalidParameterError(ValueError):
    """Raised when a generator precondition is violated.

    Always raised before the graph sink is touched, so a failed call leaves
    the caller's graph exactly as it was.
    """


class GraphGenerationError(Exception):
    """Raised when graph generation fails at runtime."""


class ResourceExhaustedError(GraphGenerationError):
    """Raised when a bounded retry or probe loop runs out of budget."""
