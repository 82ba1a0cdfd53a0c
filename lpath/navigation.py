"""
Uniform access to the shapes a path can walk through.

Every value met during traversal is wrapped in a `NavigableValue` so the
evaluator and mutator never branch on concrete Python types themselves.
"""

from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from enum import Enum
from typing import Any, Protocol

from .errors import LPathInvalidTargetError, LPathNotIndexableError
from .literals import UNDEFINED, parse_number
from .settings import get_settings


class Shape(Enum):
    NULL = "null"
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    INVOCABLE = "invocable"


class NavigableValue(Protocol):
    shape: Shape

    def read(self, key: int | str) -> Any: ...

    def write(self, key: int | str, value: Any) -> None: ...

    def member(self, name: str) -> Any: ...


_SCALAR_TYPES = (str, bytes, bytearray, int, float, complex, bool)


def _as_position(key: int | str) -> int | None:
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    number = parse_number(key) if key.strip() else None
    return number if isinstance(number, int) else None


class _NullValue:
    shape = Shape.NULL

    def __init__(self, value: Any):
        self.value = value

    def read(self, key):
        return UNDEFINED

    def write(self, key, value):
        raise LPathInvalidTargetError(
            path=None, token=str(key), message=f"Cannot set '{key}' on {self.value!r}."
        )

    def member(self, name):
        return UNDEFINED


class _ScalarValue:
    shape = Shape.SCALAR

    def __init__(self, value: Any):
        self.value = value

    def read(self, key):
        if isinstance(self.value, str | bytes | bytearray):
            position = _as_position(key)
            if position is not None:
                if -len(self.value) <= position < len(self.value):
                    return self.value[position]
                return UNDEFINED
        return getattr(self.value, str(key), UNDEFINED)

    def write(self, key, value):
        raise LPathInvalidTargetError(
            path=None,
            token=str(key),
            message=f"Cannot set '{key}' on scalar {type(self.value).__name__}.",
        )

    def member(self, name):
        return getattr(self.value, name, UNDEFINED)


class _SequenceValue:
    shape = Shape.SEQUENCE

    def __init__(self, value: Sequence):
        self.value = value

    def read(self, key):
        position = _as_position(key)
        if position is None:
            return getattr(self.value, str(key), UNDEFINED)
        if -len(self.value) <= position < len(self.value):
            return self.value[position]
        return UNDEFINED

    def write(self, key, value):
        if not isinstance(self.value, MutableSequence):
            raise LPathNotIndexableError(
                path=None,
                token=str(key),
                message=f"Cannot assign into immutable {type(self.value).__name__}.",
            )
        position = _as_position(key)
        if position is None:
            raise LPathNotIndexableError(
                path=None,
                token=str(key),
                message=f"Sequence index must be an integer, got '{key}'.",
            )
        if position < 0:
            if position < -len(self.value):
                raise LPathNotIndexableError(
                    path=None,
                    token=str(key),
                    message=f"Index {position} is out of range for length {len(self.value)}.",
                )
        else:
            gap = position - len(self.value)
            max_gap = get_settings().max_index_gap
            if gap > max_gap:
                raise LPathNotIndexableError(
                    path=None,
                    token=str(key),
                    message=(
                        f"Index {position} would pad {gap} slots past length "
                        f"{len(self.value)}; the limit is {max_gap}."
                    ),
                )
            while len(self.value) <= position:
                self.value.append(None)
        self.value[position] = value

    def member(self, name):
        return getattr(self.value, name, UNDEFINED)


class _MappingValue:
    shape = Shape.MAPPING

    def __init__(self, value: Mapping):
        self.value = value

    def read(self, key):
        if key in self.value:
            return self.value[key]
        # Integer keys also match their string form, as JSON-shaped data uses.
        if isinstance(key, int) and str(key) in self.value:
            return self.value[str(key)]
        return UNDEFINED

    def write(self, key, value):
        if not isinstance(self.value, MutableMapping):
            raise LPathInvalidTargetError(
                path=None,
                token=str(key),
                message=f"Cannot assign into immutable {type(self.value).__name__}.",
            )
        self.value[key] = value

    def member(self, name):
        if name in self.value:
            return self.value[name]
        return getattr(self.value, name, UNDEFINED)


class _InvocableValue:
    shape = Shape.INVOCABLE

    def __init__(self, value: Any):
        self.value = value

    def read(self, key):
        return getattr(self.value, str(key), UNDEFINED)

    def write(self, key, value):
        try:
            setattr(self.value, str(key), value)
        except (AttributeError, TypeError) as ex:
            raise LPathInvalidTargetError(
                path=None, token=str(key), message=str(ex)
            ) from ex

    def member(self, name):
        return getattr(self.value, name, UNDEFINED)


def navigable(value: Any) -> NavigableValue:
    if value is None or value is UNDEFINED:
        return _NullValue(value)
    if isinstance(value, _SCALAR_TYPES):
        return _ScalarValue(value)
    if isinstance(value, Mapping):
        return _MappingValue(value)
    if isinstance(value, Sequence):
        return _SequenceValue(value)
    return _InvocableValue(value)


def is_absent(value: Any) -> bool:
    return value is None or value is UNDEFINED
