"""Grammar parser for the presentation-language schema dialect.

Each sub-grammar is a function ``(text, pos) -> (value, end)`` that returns
None when it does not match. Failing sub-grammars never consume input, so
alternatives are tried in order by simply calling the next one at the same
position. Only :func:`parse` raises.
"""

import re
from typing import Any, Callable, List, Optional, Tuple

from .nodes import (
    Alias,
    Case,
    Definition,
    Empty,
    Enum,
    Exact,
    Field,
    Fields,
    Max,
    MinMax,
    Prose,
    ReferenceToType,
    Select,
    Struct,
    Value,
    Variable,
)


_WHITESPACE = re.compile(r"[ \t\r\n]*")
_WHITESPACE_REQUIRED = re.compile(r"[ \t\r\n]+")
# Unicode letters and digits, no underscore
_TYPE_NAME = re.compile(r"[^\W_]+")
_FIELD_NAME = re.compile(r"\w+")
_DIGITS = re.compile(r"[0-9]+")
_ALPHANUMERIC = re.compile(r"[A-Za-z0-9]+")
# Lengths are machine-sized unsigned integers
MAX_LENGTH = 2 ** 64 - 1

Result = Optional[Tuple[Any, int]]


class ParseError(Exception):
    """Base class for schema parse failures."""


class TrailingDataError(ParseError):
    """
    The definitions that matched did not cover the whole input.

    Raised as well when not even the first definition matched, in which
    case the remainder is the whole (trimmed) input.

    Attributes:
        remainder: The unparsed suffix of the input, verbatim.
    """

    def __init__(self, remainder: str):
        super().__init__(f"Trailing data detected:\n{remainder}")
        self.remainder = remainder


def parse(text: str) -> List[Definition]:
    """
    Parse a whole schema into its top-level definitions.

    Args:
        text: Schema source, already stripped of comments.

    Returns:
        Definitions in source order.

    Raises:
        TrailingDataError: If any text is left once no further definition
            matches.
    """
    definitions: List[Definition] = []
    pos = _skip_whitespace(text, 0)

    while pos < len(text):
        result = _definition(text, pos)
        if result is None:
            break
        definition, end = result
        definitions.append(definition)
        pos = _skip_whitespace(text, end)

    remainder = text[pos:]
    if remainder:
        raise TrailingDataError(remainder)

    return definitions


# Primitives

def _skip_whitespace(text: str, pos: int) -> int:
    return _WHITESPACE.match(text, pos).end()


def _require_whitespace(text: str, pos: int) -> Optional[int]:
    match = _WHITESPACE_REQUIRED.match(text, pos)
    return match.end() if match else None


def _tag(text: str, pos: Optional[int], literal: str) -> Optional[int]:
    """Match a literal; ``pos`` may be None to chain after a failed step."""
    if pos is None or not text.startswith(literal, pos):
        return None
    return pos + len(literal)


def _token(pattern, text: str, pos: Optional[int]) -> Result:
    if pos is None:
        return None
    match = pattern.match(text, pos)
    if not match:
        return None
    return match.group(), match.end()


def _take_until(text: str, pos: Optional[int], stop: str) -> Result:
    """Take a non-empty run of characters up to (not including) ``stop``."""
    if pos is None:
        return None
    end = text.find(stop, pos)
    if end == -1:
        end = len(text)
    if end == pos:
        return None
    return text[pos:end], end


def _keyword(text: str, pos: int, word: str) -> Optional[int]:
    """Match ``word`` followed by at least one whitespace character."""
    end = _tag(text, pos, word)
    if end is None:
        return None
    return _require_whitespace(text, end)


def _many(parser: Callable[[str, int], Result], text: str, pos: int) -> Tuple[list, int]:
    """Zero or more ``parser`` matches, each with surrounding whitespace."""
    items = []
    while True:
        result = parser(text, _skip_whitespace(text, pos))
        if result is None:
            return items, pos
        item, end = result
        items.append(item)
        pos = _skip_whitespace(text, end)


def _separated(
    parser: Callable[[str, int], Result],
    separator: str,
    text: str,
    pos: int,
) -> Result:
    """One or more ``parser`` matches separated by ``separator``."""
    result = parser(text, _skip_whitespace(text, pos))
    if result is None:
        return None
    item, end = result
    items = [item]
    pos = _skip_whitespace(text, end)

    while True:
        end = _tag(text, pos, separator)
        if end is None:
            break
        result = parser(text, _skip_whitespace(text, end))
        if result is None:
            # the dangling separator is left for the caller
            break
        item, end = result
        items.append(item)
        pos = _skip_whitespace(text, end)

    return items, pos


# Definitions

def _definition(text: str, pos: int) -> Result:
    """A struct, an enum, or a bare field read as a type alias, in that order."""
    result = _struct(text, pos)
    if result is not None:
        return result

    result = _enum(text, pos)
    if result is not None:
        return result

    result = _field(text, pos)
    if result is not None:
        field, end = result
        return Alias(field), end

    return None


def _struct(text: str, pos: int) -> Result:
    """``struct { (field | select)* } NAME;``"""
    end = _keyword(text, pos, "struct")
    end = _tag(text, end, "{")
    if end is None:
        return None

    items, end = _many(_field_or_select, text, end)

    end = _tag(text, end, "}")
    if end is None:
        return None

    name = _take_until(text, _skip_whitespace(text, end), ";")
    if name is None:
        return None
    name, end = name

    end = _tag(text, end, ";")
    if end is None:
        return None

    return Struct(name=name, items=tuple(items)), end


def _field_or_select(text: str, pos: int) -> Result:
    return _field(text, pos) or _select(text, pos)


def _field(text: str, pos: int) -> Result:
    """``TYPE NAME [RANGE] [= DEFAULT];``"""
    result = _type_reference(text, pos)
    if result is None:
        return None
    (type_name, optional), end = result

    name = _token(_FIELD_NAME, text, _require_whitespace(text, end))
    if name is None:
        return None
    name, end = name

    range_ = None
    result = _range(text, end)
    if result is not None:
        range_, end = result

    default = None
    result = _default(text, end)
    if result is not None:
        default, end = result

    end = _tag(text, end, ";")
    if end is None:
        return None

    return Field(
        type_name=type_name,
        name=name,
        range=range_,
        optional=optional,
        default=default,
    ), end


def _type_reference(text: str, pos: int) -> Result:
    """``optional<T>`` or a bare type name; yields ``(name, optional)``."""
    inner = _token(_TYPE_NAME, text, _tag(text, pos, "optional<"))
    if inner is not None:
        name, end = inner
        end = _tag(text, end, ">")
        if end is not None:
            return (name, True), end

    result = _token(_TYPE_NAME, text, pos)
    if result is None:
        return None
    name, end = result
    return (name, False), end


def _range(text: str, pos: int) -> Result:
    """``[n]``, ``[expr]``, ``<min..max>`` or ``<V>``."""
    end = _tag(text, pos, "[")
    if end is not None:
        body = _exact(text, end) or _prose(text, end)
    else:
        end = _tag(text, pos, "<")
        if end is None:
            return None
        body = _min_max(text, end) or _variable(text, end)

    if body is None:
        return None
    range_, end = body

    closing = "]" if text[pos] == "[" else ">"
    end = _tag(text, end, closing)
    if end is None:
        return None
    return range_, end


def _exact(text: str, pos: int) -> Result:
    """A literal length; one above MAX_LENGTH does not match, leaving it to prose."""
    length = _length(text, pos)
    if length is None:
        return None
    value, end = length
    return Exact(value), end


def _prose(text: str, pos: int) -> Result:
    result = _take_until(text, pos, "]")
    if result is None:
        return None
    expression, end = result
    return Prose(expression), end


def _min_max(text: str, pos: int) -> Result:
    """``min..max``; either bound above MAX_LENGTH fails the match."""
    low = _length(text, pos)
    if low is None:
        return None
    low, end = low

    high = _length(text, _tag(text, end, ".."))
    if high is None:
        return None
    high, end = high

    return MinMax(low, high), end


def _length(text: str, pos: Optional[int]) -> Result:
    result = _token(_DIGITS, text, pos)
    if result is None:
        return None
    digits, end = result
    if len(digits.lstrip("0")) > len(str(MAX_LENGTH)) or int(digits) > MAX_LENGTH:
        return None
    return int(digits), end


def _variable(text: str, pos: int) -> Result:
    end = _tag(text, pos, "V")
    if end is None:
        return None
    return Variable(), end


def _default(text: str, pos: int) -> Result:
    """``= VALUE`` up to (not including) the terminating ``;``."""
    end = _tag(text, _skip_whitespace(text, pos), "=")
    if end is None:
        return None
    return _take_until(text, _skip_whitespace(text, end), ";")


# Selects

def _select(text: str, pos: int) -> Result:
    """``select (OVER) { case* };``"""
    end = _keyword(text, pos, "select")
    end = _tag(text, end, "(")
    if end is None:
        return None

    over = _take_until(text, _skip_whitespace(text, end), ")")
    if over is None:
        return None
    over, end = over

    end = _tag(text, end, ")")
    if end is None:
        return None
    end = _tag(text, _skip_whitespace(text, end), "{")
    if end is None:
        return None

    cases, end = _many(_case, text, end)

    end = _tag(text, end, "}")
    if end is None:
        return None
    end = _tag(text, _skip_whitespace(text, end), ";")
    if end is None:
        return None

    return Select(over=over, cases=tuple(cases)), end


def _case(text: str, pos: int) -> Result:
    """``case LABEL: BODY``"""
    end = _keyword(text, pos, "case")
    label = _take_until(text, end, ":")
    if label is None:
        return None
    label, end = label

    end = _tag(text, end, ":")
    if end is None:
        return None

    body, end = _empty_case(text, end) or _reference_case(text, end) or _fields_case(text, end)
    return Case(left=label, right=body), end


def _empty_case(text: str, pos: int) -> Result:
    end = _tag(text, _skip_whitespace(text, pos), "struct{};")
    if end is None:
        return None
    return Empty(), _skip_whitespace(text, end)


def _reference_case(text: str, pos: int) -> Result:
    """A lone type name followed by ``;``."""
    result = _token(_ALPHANUMERIC, text, _skip_whitespace(text, pos))
    if result is None:
        return None
    type_name, end = result

    end = _tag(text, end, ";")
    if end is None:
        return None
    return ReferenceToType(type_name), _skip_whitespace(text, end)


def _fields_case(text: str, pos: int) -> Result:
    # Always matches, possibly with no fields at all
    fields, end = _many(_field, text, pos)
    return Fields(tuple(fields)), end


# Enums

def _enum(text: str, pos: int) -> Result:
    """``enum { item (, item)* } NAME;``"""
    end = _keyword(text, pos, "enum")
    end = _tag(text, end, "{")
    if end is None:
        return None

    items = _separated(_enum_item, ",", text, end)
    if items is None:
        return None
    items, end = items

    end = _tag(text, end, "}")
    if end is None:
        return None

    name = _take_until(text, _skip_whitespace(text, end), ";")
    if name is None:
        return None
    name, end = name

    end = _tag(text, end, ";")
    if end is None:
        return None

    return Enum(name=name, items=tuple(items)), end


def _enum_item(text: str, pos: int) -> Result:
    """``name(n)`` or the unnamed sentinel ``(n)``."""
    name = _token(_FIELD_NAME, text, pos)
    if name is not None:
        name, end = name
        numeral = _numeral(text, end)
        if numeral is not None:
            value, end = numeral
            return Value(name=name, value=value), end

    numeral = _numeral(text, pos)
    if numeral is None:
        return None
    value, end = numeral
    return Max(value), end


def _numeral(text: str, pos: int) -> Result:
    """``(digits)``, yielding the digits as text."""
    result = _token(_DIGITS, text, _tag(text, pos, "("))
    if result is None:
        return None
    digits, end = result

    end = _tag(text, end, ")")
    if end is None:
        return None
    return digits, end
