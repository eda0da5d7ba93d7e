"""Exceptions raised while building renderer scenes from condition rows."""


class RemodelError(ValueError):
    """Base class for per-row remodeling failures.

    A row that raises a subclass of this error is unusable, but the remaining
    rows of a batch can still be processed.
    """


class MissingParameterError(RemodelError):
    """Raised when the active camera variant or render mode needs a value
    the condition row does not provide."""

    def __init__(self, name: str, context: str | None = None):
        self.name = name
        self.context = context
        message = f"Missing required condition parameter '{name}'"
        if context:
            message += f" ({context})"
        super().__init__(message)


class InvalidParameterError(RemodelError):
    """Raised when a condition value is present but cannot be used."""


class MalformedLensNameError(RemodelError):
    """Raised when a focal length cannot be parsed from a lens name."""

    def __init__(self, lens: str, reason: str):
        self.lens = lens
        super().__init__(f"Malformed lens name '{lens}': {reason}")


class SceneStructureError(RemodelError):
    """Raised when a native scene lacks an element the engine rewrites."""


class ConditionFileError(RemodelError):
    """Raised when a conditions file cannot be parsed."""
