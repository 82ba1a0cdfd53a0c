from dataclasses import dataclass
from typing import Union

from .errors import LPathTokenizeError
from .literals import LiteralValue, parse_arguments, parse_number


@dataclass(frozen=True)
class PropertyToken:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class IndexToken:
    key: int | str

    def __str__(self) -> str:
        return f"[{self.key}]"


@dataclass(frozen=True)
class FunctionCallToken:
    name: str
    args: tuple[LiteralValue, ...] = ()

    def __str__(self) -> str:
        return f"{self.name}({', '.join(repr(arg) for arg in self.args)})"


PathToken = Union[PropertyToken, IndexToken, FunctionCallToken]


def _index_key(content: str) -> int | str:
    number = parse_number(content) if content.strip() else None
    if isinstance(number, int):
        return number
    if isinstance(number, float) and number.is_integer():
        return int(number)
    return content


def _scan_enclosed(path: str, start: int, opener: str, closer: str) -> tuple[str, int]:
    """
    Collect the text between `path[start]` (an opener) and its matching closer.

    Returns the enclosed text and the position right after the closer. An
    unterminated opener consumes the rest of the path.
    """
    depth = 1
    pos = start + 1
    while pos < len(path):
        ch = path[pos]
        if ch == opener:
            depth += 1
        elif ch == closer:
            depth -= 1
            if depth == 0:
                return path[start + 1 : pos], pos + 1
        pos += 1
    return path[start + 1 :], len(path)


def _flush_property(tokens: list[PathToken], buffer: list[str]):
    if buffer:
        tokens.append(PropertyToken("".join(buffer)))
        buffer.clear()


def tokenize(path: str) -> list[PathToken]:
    """
    Split a path expression into property, index and function-call tokens.

    Examples:
        >>> tokenize("a.b[0].c(x, 'y')")
        [PropertyToken(name='a'), PropertyToken(name='b'), IndexToken(key=0), FunctionCallToken(name='c', args=('x', 'y'))]
        >>> tokenize("x[ab]")
        [PropertyToken(name='x'), IndexToken(key='ab')]

    Raises:
        LPathTokenizeError: If `path` is not a string.
    """
    if not isinstance(path, str):
        raise LPathTokenizeError(
            path=repr(path),
            token=None,
            message=f"Path must be a string, got {type(path).__name__}.",
        )

    tokens: list[PathToken] = []
    buffer: list[str] = []
    pos = 0
    while pos < len(path):
        ch = path[pos]
        if ch == ".":
            _flush_property(tokens, buffer)
        elif ch == "[":
            _flush_property(tokens, buffer)
            content, pos = _scan_enclosed(path, pos, "[", "]")
            tokens.append(IndexToken(_index_key(content)))
            continue
        elif ch == "(":
            name = "".join(buffer)
            buffer.clear()
            content, pos = _scan_enclosed(path, pos, "(", ")")
            tokens.append(FunctionCallToken(name, tuple(parse_arguments(content))))
            continue
        else:
            buffer.append(ch)
        pos += 1

    _flush_property(tokens, buffer)
    return tokens
