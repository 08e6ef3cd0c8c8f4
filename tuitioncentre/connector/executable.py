"""Operations that can be executed and copied."""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from typing import Any, Callable, TypeVar

from tuitioncentre.connector.errors import Error

_F = TypeVar("_F", bound=Callable[..., Any])


def _wrap(func: _F) -> _F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (Error, IndexError):
            raise
        except Exception as exc:
            raise Error(str(exc) or "Unknown exception") from exc

    return wrapper  # type: ignore[return-value]


class Operation(ABC):
    """The implementation of an executable operation."""

    @abstractmethod
    def execute(self) -> Any:
        """Run the operation and return its result."""

    @abstractmethod
    def clone(self) -> Operation:
        """Return an independent copy of this operation's description."""


class Executable:
    """Wraps an Operation; copies are independent of the original."""

    def __init__(self, impl: Operation | Executable | None = None) -> None:
        self._impl: Operation | None = None
        self.reset(impl)

    @_wrap
    def reset(self, impl: Operation | Executable | None) -> None:
        """Use a new operation, or a copy of another executable's operation."""
        if isinstance(impl, Executable):
            if impl._impl is self._impl:
                return
            if impl._impl is None:
                raise Error("Attempt to use invalid operation")
            self._impl = impl._impl.clone()
        else:
            self._impl = impl

    def copy(self) -> Executable:
        """Return an executable describing the same operation, independently."""
        return Executable(self)

    def __copy__(self) -> Executable:
        return self.copy()

    @_wrap
    def execute(self) -> Any:
        """Execute the operation and return its result."""
        if self._impl is None:
            raise Error("Attempt to use invalid operation")
        return self._impl.execute()