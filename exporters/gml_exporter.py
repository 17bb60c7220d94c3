"""GML (Graph Modelling Language) exporter for definition graphs."""

from graph.model import DefinitionGraph


def to_gml(graph: DefinitionGraph, include_undefined: bool = True) -> str:
    """
    Convert a definition graph to GML.

    Every definition becomes a node whose id and label are its name. Edges
    may point at names that are not nodes (primitive or external types).

    Args:
        graph: The definition graph to export.
        include_undefined: If True, keep edges to undefined type names.

    Returns:
        GML string.
    """
    lines = ["graph ["]

    for name in graph.nodes:
        quoted = _quote(name)
        lines.append(f"\tnode [id {quoted} label {quoted}]")

    for source, target in graph.iter_edges():
        if not include_undefined and not graph.is_defined(target):
            continue
        lines.append(f"\tedge [source {_quote(source)} target {_quote(target)}]")

    lines.append("]")
    return "\n".join(lines)


def _quote(value: str) -> str:
    """Quote a GML string value; GML escapes quotes as HTML entities."""
    return '"' + value.replace("&", "&amp;").replace('"', "&quot;") + '"'
