"""Lightweight result type for operation outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    """Represents the outcome of an operation.

    Supports boolean evaluation.  A successful result carries its payload
    in *value*; a failed one carries a description of what went wrong in
    *error*.

    Examples::

        r = Result.ok(value=media_type)
        if r:
            print(r.value)

        r = Result.fail("missing '/'")
        assert not r
    """

    success: bool
    message: str = ""
    value: T | None = field(default=None, repr=False)
    error: Any = field(default=None, repr=False)

    # -- constructors ------------------------------------------------------

    @classmethod
    def ok(cls, message: str = "", *, value: T | None = None) -> Result[T]:
        return cls(success=True, message=message, value=value)

    @classmethod
    def fail(cls, message: str = "", *, error: Any = None) -> Result[T]:
        return cls(success=False, message=message, error=error)

    # -- accessors ---------------------------------------------------------

    def unwrap_or(self, default: T) -> T:
        """Return the payload on success, *default* otherwise."""
        if self.success and self.value is not None:
            return self.value
        return default

    # -- protocols ---------------------------------------------------------

    def __bool__(self) -> bool:
        return self.success
