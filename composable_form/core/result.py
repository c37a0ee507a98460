"""Ok/Err result models shared by parsers and filled forms."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Union

from pydantic import BaseModel, ConfigDict


class Ok(BaseModel):
    """Successful outcome carrying a value."""

    value: Any

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def __init__(self, value: Any = None, **data: Any) -> None:
        super().__init__(value=value, **data)

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap_or(self, default: Any) -> Any:
        return self.value

    def map(self, fn: Callable[[Any], Any]) -> Ok:
        """Apply fn to the carried value."""
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[Any], Any]) -> Ok:
        return self


class Err(BaseModel):
    """Failed outcome carrying an error payload.

    Parsers put a plain message in ``error``; forms always put an
    ``ErrorList`` there.
    """

    error: Any

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def __init__(self, error: Any = None, **data: Any) -> None:
        super().__init__(error=error, **data)

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap_or(self, default: Any) -> Any:
        return default

    def map(self, fn: Callable[[Any], Any]) -> Err:
        return self

    def map_err(self, fn: Callable[[Any], Any]) -> Err:
        """Apply fn to the carried error."""
        return Err(fn(self.error))


Result = Union[Ok, Err]
