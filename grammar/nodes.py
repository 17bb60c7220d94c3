"""AST node types for the presentation-language schema dialect.

Every node is an immutable dataclass. The closed sets of shapes
(definitions, struct items, ranges, case bodies and enum items) are
``Union`` aliases over their variant classes; consumers dispatch with
``isinstance``.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


# Ranges

@dataclass(frozen=True)
class Exact:
    """Fixed-length array, written ``[n]``."""

    length: int


@dataclass(frozen=True)
class Prose:
    """Array whose length is a free-form expression, written ``[expr]``."""

    text: str


@dataclass(frozen=True)
class MinMax:
    """Bounded-length vector, written ``<min..max>``.

    ``min`` is not checked against ``max``.
    """

    min: int
    max: int


@dataclass(frozen=True)
class Variable:
    """Unbounded-length vector, written ``<V>``."""


Range = Union[Exact, Prose, MinMax, Variable]


# Fields and selects

@dataclass(frozen=True)
class Field:
    """
    A single field declaration: ``TYPE NAME [RANGE] [= DEFAULT];``.

    When the type was written as ``optional<T>``, ``type_name`` holds ``T``
    and ``optional`` is True.
    """

    type_name: str
    name: str
    range: Optional[Range] = None
    optional: bool = False
    default: Optional[str] = None


@dataclass(frozen=True)
class Empty:
    """Case body written as ``struct{};``."""


@dataclass(frozen=True)
class ReferenceToType:
    """Case body that is a single bare type name, e.g. ``Add;``."""

    type_name: str


@dataclass(frozen=True)
class Fields:
    """Case body made of zero or more inline field declarations."""

    fields: Tuple[Field, ...] = ()


CaseBody = Union[Empty, ReferenceToType, Fields]


@dataclass(frozen=True)
class Case:
    """One ``case LABEL: BODY`` arm of a select."""

    left: str
    right: CaseBody


@dataclass(frozen=True)
class Select:
    """
    A ``select (OVER) { case ... };`` discriminated union.

    ``over`` is kept as raw text and never treated as a type.
    """

    over: str
    cases: Tuple[Case, ...] = ()


FieldOrSelect = Union[Field, Select]


# Enum items

@dataclass(frozen=True)
class Value:
    """Named enumerator with its numeral, e.g. ``mls10(1)``."""

    name: str
    value: str


@dataclass(frozen=True)
class Max:
    """Unnamed sentinel entry giving the upper bound, e.g. ``(255)``."""

    value: str


EnumItem = Union[Value, Max]


# Top-level definitions

@dataclass(frozen=True)
class Struct:
    """A ``struct { ... } NAME;`` definition; items keep wire order."""

    name: str
    items: Tuple[FieldOrSelect, ...] = ()


@dataclass(frozen=True)
class Enum:
    """An ``enum { item, ... } NAME;`` definition."""

    name: str
    items: Tuple[EnumItem, ...] = ()


@dataclass(frozen=True)
class Alias:
    """A bare top-level field, read as a type alias."""

    field: Field

    @property
    def name(self) -> str:
        return self.field.name


Definition = Union[Struct, Enum, Alias]
