import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from .errors import (
    LPathError,
    LPathInvalidTargetError,
    LPathNotIndexableError,
    LPathNotInvocableError,
)
from .literals import UNDEFINED
from .navigation import Shape, is_absent, navigable
from .settings import get_settings
from .tokenizer import FunctionCallToken, IndexToken, PathToken, tokenize

logger = logging.getLogger(__name__)


@contextmanager
def _path_context(path: str) -> Iterator[None]:
    # Navigation errors are raised without the full path; attach it here.
    try:
        yield
    except LPathError as ex:
        if ex.path is not None:
            raise
        raise type(ex)(path=path, token=ex.token, message=ex.message) from ex


def _token_key(token: PathToken) -> int | str:
    if isinstance(token, IndexToken):
        return token.key
    return token.name


def _invoke(current: Any, token: FunctionCallToken) -> Any:
    member = navigable(current).member(token.name)
    if not callable(member):
        raise LPathNotInvocableError(
            path=None,
            token=str(token),
            message=f"Member '{token.name}' of {type(current).__name__} is not callable.",
        )
    return member(*token.args)


def _read_step(current: Any, token: PathToken) -> Any:
    if isinstance(token, FunctionCallToken):
        return _invoke(current, token)
    return navigable(current).read(_token_key(token))


def _require_sequence(current: Any, token: PathToken):
    if navigable(current).shape is not Shape.SEQUENCE:
        raise LPathNotIndexableError(
            path=None,
            token=str(token),
            message=f"Cannot index into {type(current).__name__}; a sequence is required.",
        )


def _new_container_for_next_write(next_token: PathToken) -> Any:
    if isinstance(next_token, IndexToken):
        return []
    return {}


def _descend_for_write(current: Any, token: PathToken, next_token: PathToken) -> Any:
    if isinstance(token, FunctionCallToken):
        return _invoke(current, token)
    if isinstance(token, IndexToken):
        _require_sequence(current, token)

    target = navigable(current)
    key = _token_key(token)
    child = target.read(key)
    if is_absent(child):
        child = _new_container_for_next_write(next_token)
        target.write(key, child)
    return child


def _assign(current: Any, token: PathToken, value: Any):
    if isinstance(token, FunctionCallToken):
        raise LPathInvalidTargetError(
            path=None,
            token=str(token),
            message="Cannot assign to the result of a function call.",
        )
    if isinstance(token, IndexToken):
        _require_sequence(current, token)
    navigable(current).write(_token_key(token), value)


def _get_path_value(root: Any, path: str, default: Any) -> Any:
    tokens = tokenize(path)
    if is_absent(root):
        return default

    current = root
    for token in tokens:
        if is_absent(current):
            return default
        current = _read_step(current, token)
    return default if current is UNDEFINED else current


def _path_exists(root: Any, path: str) -> bool:
    tokens = tokenize(path)
    if is_absent(root):
        return False

    current = root
    for token in tokens:
        if is_absent(current):
            return False
        current = _read_step(current, token)
    return current is not UNDEFINED


def _set_path_value(root: Any, path: str, value: Any) -> Any:
    tokens = tokenize(path)
    if is_absent(root) or not tokens:
        return root

    current = root
    for token, next_token in zip(tokens, tokens[1:]):
        current = _descend_for_write(current, token, next_token)
    _assign(current, tokens[-1], value)
    return root


class LPath:
    """
    Path-expression engine over nested dicts, lists and plain objects.

    Paths combine dotted properties, bracketed indexes and calls with literal
    arguments, e.g. ``order.items[0].name.upper()``.

    By default every failure is absorbed: `get` falls back to its default,
    `set` hands back the root, and `exists` answers False. With strict mode
    (constructor argument, per-call keyword, or the `LPATH_STRICT` environment
    variable) the underlying exception is raised instead.
    """

    def __init__(self, strict: bool | None = None):
        self._strict = strict

    def _is_strict(self, strict: bool | None) -> bool:
        if strict is not None:
            return strict
        if self._strict is not None:
            return self._strict
        return get_settings().strict

    def tokenize(self, path: str) -> list[PathToken]:
        return tokenize(path)

    def get(self, root: Any, path: str, default=None, *, strict: bool | None = None):
        """
        Resolve and return the value at `path` inside `root`.

        A None or missing value part way along the path yields `default`, as
        does a missing final value. A final value of None is returned as is.

        Args:
            root: Value to read from.
            path: Path expression.
            default: Value returned when the path cannot be resolved.
            strict: If True, errors propagate instead of returning `default`.

        Raises:
            LPathError: In strict mode, when the path cannot be walked
                (for example `LPathNotInvocableError` for a call on a
                non-callable member). Exceptions raised by invoked members
                propagate unchanged.

        Examples:
            >>> lpath.get({"a": {"b": [{"c": 1}]}}, "a.b[0].c")
            1
            >>> lpath.get({"name": "ada"}, "name.upper()")
            'ADA'
            >>> lpath.get({"a": None}, "a.b.c", default="n/a")
            'n/a'
        """
        try:
            with _path_context(path):
                return _get_path_value(root, path, default)
        except Exception as ex:
            if self._is_strict(strict):
                raise
            logger.debug("get(%r) fell back to default: %s", path, ex)
            return default

    def exists(self, root: Any, path: str, *, strict: bool | None = None) -> bool:
        """
        Check whether `path` resolves to a present value inside `root`.

        Calls along the path are invoked, exactly as `get` would.
        """
        try:
            with _path_context(path):
                return _path_exists(root, path)
        except Exception as ex:
            if self._is_strict(strict):
                raise
            logger.debug("exists(%r) failed: %s", path, ex)
            return False

    def set(self, root: Any, path: str, value: Any, *, strict: bool | None = None) -> Any:
        """
        Write `value` at `path` inside `root`, creating missing containers.

        A missing step becomes a list when the following step is an index and
        a dict otherwise. Existing entries are never removed or reordered.

        Args:
            root: Value to mutate in place.
            path: Path expression; its last step must be a property or index.
            value: Value to store.
            strict: If True, errors propagate instead of being absorbed.

        Returns:
            The same `root` object. On failure the mutation stops where it
            failed, so containers created before that point remain.

        Raises:
            LPathNotIndexableError: In strict mode, when an index step meets
                something that is not a sequence.
            LPathInvalidTargetError: In strict mode, when the last step is a
                call or the target cannot hold the value.

        Examples:
            >>> lpath.set({}, "a.b[0].c", 5)
            {'a': {'b': [{'c': 5}]}}
        """
        try:
            with _path_context(path):
                return _set_path_value(root, path, value)
        except Exception as ex:
            if self._is_strict(strict):
                raise
            logger.debug("set(%r) abandoned: %s", path, ex)
            return root


lpath = LPath()
