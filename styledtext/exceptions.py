"""Library exceptions."""


class StyledTextException(Exception):
    """Generic styledtext exception."""


class BuilderFinalizedError(StyledTextException):
    """An append was attempted on a builder that has been finalized."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            f"Cannot {operation}() on a finalized builder; start a new Builder"
        )


class DocumentError(StyledTextException):
    """A styled text document could not be loaded."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
