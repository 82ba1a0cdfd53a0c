import json
import math
import re
from typing import Any


class _Undefined:
    """Marker for an absent value, distinct from ``None`` (null)."""

    _instance: "_Undefined | None" = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()

# str | int | float | bool | None | UNDEFINED | list | dict
LiteralValue = Any

_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_QUOTES = ("'", '"')
_KEYWORDS = {"true": True, "false": False, "null": None, "undefined": UNDEFINED}


def parse_number(text: str) -> int | float | None:
    """
    Parse a base-10 number literal, or return None if `text` is not one.

    Integral literals (no fraction, no exponent) become `int`, everything else
    becomes `float`. `Infinity` and `-Infinity` are accepted.

    Examples:
        >>> parse_number("42")
        42
        >>> parse_number("-1.5e3")
        -1500.0
        >>> parse_number("0x10") is None
        True
    """
    stripped = text.strip()
    if _NUMBER_RE.fullmatch(stripped):
        if any(ch in stripped for ch in ".eE"):
            return float(stripped)
        try:
            return int(stripped)
        except ValueError:
            # Beyond the int-string digit limit.
            return float(stripped)
    if stripped in ("Infinity", "+Infinity"):
        return math.inf
    if stripped == "-Infinity":
        return -math.inf
    return None


def _reject_constant(name: str):
    raise ValueError(f"'{name}' is not valid JSON.")


def _parse_structured(text: str) -> LiteralValue:
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return text


def parse_value(field: str) -> LiteralValue:
    """
    Convert one raw argument into a literal value.

    Never fails: text matching no literal shape is returned as the trimmed string.

    Examples:
        >>> parse_value(" 'two' ")
        'two'
        >>> parse_value("[3, 4]")
        [3, 4]
        >>> parse_value("[3, four]")
        '[3, four]'
        >>> parse_value("null") is None
        True
    """
    trimmed = field.strip()
    if not trimmed:
        return ""

    if len(trimmed) >= 2 and trimmed[0] in _QUOTES and trimmed[-1] == trimmed[0]:
        return trimmed[1:-1]

    if (trimmed[0], trimmed[-1]) in {("[", "]"), ("{", "}")}:
        return _parse_structured(trimmed)

    number = parse_number(trimmed)
    if number is not None:
        return number

    if trimmed in _KEYWORDS:
        return _KEYWORDS[trimmed]
    return trimmed


def parse_arguments(raw: str) -> list[LiteralValue]:
    """
    Split a function-call argument string into literal values.

    Commas inside quotes, parentheses, brackets or braces do not split fields.

    Examples:
        >>> parse_arguments("1, 'two', [3,4], true, null")
        [1, 'two', [3, 4], True, None]
        >>> parse_arguments('"a,b", 2')
        ['a,b', 2]
    """
    if not raw.strip():
        return []

    args: list[LiteralValue] = []
    buffer: list[str] = []
    quote: str | None = None
    paren_depth = 0
    bracket_depth = 0
    brace_depth = 0
    previous = ""

    for ch in raw:
        if quote is not None:
            buffer.append(ch)
            if ch == quote and previous != "\\":
                quote = None
        elif ch in _QUOTES and previous != "\\":
            quote = ch
            buffer.append(ch)
        elif (
            ch == ","
            and paren_depth == 0
            and bracket_depth == 0
            and brace_depth == 0
        ):
            args.append(parse_value("".join(buffer)))
            buffer = []
        else:
            if ch == "(":
                paren_depth += 1
            elif ch == ")":
                paren_depth -= 1
            elif ch == "[":
                bracket_depth += 1
            elif ch == "]":
                bracket_depth -= 1
            elif ch == "{":
                brace_depth += 1
            elif ch == "}":
                brace_depth -= 1
            buffer.append(ch)
        previous = ch

    tail = "".join(buffer)
    if tail.strip():
        args.append(parse_value(tail))
    return args
