from typing import Any

from .engine import LPath, lpath
from .errors import (
    ErrorKind,
    LPathError,
    LPathInvalidTargetError,
    LPathNotIndexableError,
    LPathNotInvocableError,
    LPathTokenizeError,
)
from .literals import UNDEFINED, parse_arguments, parse_value
from .tokenizer import FunctionCallToken, IndexToken, PropertyToken, tokenize


def get(root: Any, path: str, default: Any = None) -> Any:
    return lpath.get(root, path, default)


def set(root: Any, path: str, value: Any) -> Any:
    return lpath.set(root, path, value)


def exists(root: Any, path: str) -> bool:
    return lpath.exists(root, path)


__all__ = [
    "lpath",
    "LPath",
    "get",
    "set",
    "exists",
    "tokenize",
    "parse_arguments",
    "parse_value",
    "UNDEFINED",
    "PropertyToken",
    "IndexToken",
    "FunctionCallToken",
    "ErrorKind",
    "LPathError",
    "LPathTokenizeError",
    "LPathNotIndexableError",
    "LPathInvalidTargetError",
    "LPathNotInvocableError",
]
