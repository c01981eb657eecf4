"""Typed failures raised by the catalog and dispatcher.

Every failure carries a short machine-readable ``code`` that ends up in the
``ErrorResponse`` attached to a flagged ``ToolResult``.
"""


class RecipeServerError(Exception):
    """Base class for all recipe server failures."""

    code = "internal_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(RecipeServerError):
    """No artifact matches the requested identifier or topic."""

    code = "not_found"


class ReadFailureError(RecipeServerError):
    """An artifact was located but its content could not be read."""

    code = "read_failure"


class UnknownOperationError(RecipeServerError):
    """The dispatcher received an operation name it does not know."""

    code = "unknown_operation"


class InvalidArgumentsError(RecipeServerError):
    """Required arguments are missing or have the wrong type."""

    code = "invalid_arguments"
