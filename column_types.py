import abc
from typing import Any, Callable


class ColumnType(abc.ABC):
    """Casts a raw database value to the value application code works with."""

    @abc.abstractmethod
    def type_cast(self, value: Any) -> Any:
        raise NotImplementedError


class IdentityType(ColumnType):
    def type_cast(self, value):
        return value

    def __repr__(self):
        return "IdentityType()"


# shared by every result that has no type for a column
IDENTITY_TYPE = IdentityType()


class TypeCaster(ColumnType):
    """
    Wraps a plain callable such as int, float or date.fromisoformat.
    NULLs are passed through without calling it.
    """
    def __init__(self, func: Callable[[Any], Any]):
        self.func = func

    def type_cast(self, value):
        if value is None:
            return None
        return self.func(value)

    def __repr__(self):
        return f"TypeCaster({getattr(self.func, '__name__', self.func)!r})"


def as_column_type(cast) -> ColumnType:
    if isinstance(cast, ColumnType):
        return cast
    if callable(cast):
        return TypeCaster(cast)
    raise TypeError(f"Cannot use {cast!r} as a column type, expected a ColumnType or a callable.")
