"""Error hierarchy for sasscast."""
from __future__ import annotations


class SasscastError(Exception):
    """Base error for all sasscast errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class CompileError(SasscastError):
    """Raised when stylesheet source cannot be parsed or evaluated."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.line = line
        self.column = column


class SassTypeError(CompileError):
    """A stylesheet value had the wrong type for an operation."""


class ModuleResolutionError(SasscastError):
    """No candidate path resolved to a loadable module."""

    def __init__(self, module_name: str, **kwargs) -> None:
        super().__init__(f"Couldn't find module: {module_name}", **kwargs)
        self.module_name = module_name


class PropertyPathError(SasscastError):
    """A property path could not be walked through the loaded data."""

    def __init__(self, path: list[object], step: object, **kwargs) -> None:
        super().__init__(
            f"Invalid property path {path!r}: cannot resolve {step!r}", **kwargs
        )
        self.path = path
        self.step = step
