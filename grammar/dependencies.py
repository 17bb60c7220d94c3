"""Dependency extraction: which type names a definition references."""

from typing import List

from .nodes import (
    Alias,
    Case,
    Definition,
    Empty,
    Enum,
    Field,
    FieldOrSelect,
    Fields,
    ReferenceToType,
    Select,
    Struct,
)


def dependencies(definition: Definition) -> List[str]:
    """
    Compute the type names a definition references.

    Select discriminants, enum items and empty cases contribute nothing.
    Names are not resolved, so primitive types such as ``uint8`` are
    reported like any other name.

    Args:
        definition: A parsed top-level definition.

    Returns:
        Distinct type names, sorted.
    """
    if isinstance(definition, Struct):
        names = [
            name
            for item in definition.items
            for name in _item_dependencies(item)
        ]
    elif isinstance(definition, Enum):
        names = []
    elif isinstance(definition, Alias):
        names = [definition.field.type_name]
    else:
        raise TypeError(f"Not a definition: {definition!r}")

    return sorted(set(names))


def _item_dependencies(item: FieldOrSelect) -> List[str]:
    if isinstance(item, Field):
        return [item.type_name]
    if isinstance(item, Select):
        return [name for case in item.cases for name in _case_dependencies(case)]
    raise TypeError(f"Not a struct item: {item!r}")


def _case_dependencies(case: Case) -> List[str]:
    body = case.right
    if isinstance(body, Empty):
        return []
    if isinstance(body, ReferenceToType):
        return [body.type_name]
    if isinstance(body, Fields):
        return [field.type_name for field in body.fields]
    raise TypeError(f"Not a case body: {body!r}")
