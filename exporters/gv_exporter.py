"""Graphviz (DOT) exporter for definition graphs."""

import re

from graph.model import DefinitionGraph


GRAPH_ATTRIBUTES = [
    "compound=true",
    "overlap=scalexy",
    "splines=true",
    "layout=neato",
]

_PLAIN_ID = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
DOT_KEYWORDS = {"digraph", "edge", "graph", "node", "strict", "subgraph"}


def to_gv(graph: DefinitionGraph, include_undefined: bool = True) -> str:
    """
    Convert a definition graph to a Graphviz digraph.

    Each definition gets one ``name -> {dep dep ...}`` line, with empty
    braces when it references nothing.

    Args:
        graph: The definition graph to export.
        include_undefined: If True, keep edges to undefined type names.

    Returns:
        DOT string.
    """
    lines = ["digraph {"]
    lines.extend(f"\t{attribute};" for attribute in GRAPH_ATTRIBUTES)
    lines.append("")

    for name in graph.nodes:
        targets = sorted(graph.get_targets(name))
        if not include_undefined:
            targets = [target for target in targets if graph.is_defined(target)]
        joined = " ".join(_dot_id(target) for target in targets)
        lines.append(f"\t{_dot_id(name)} -> {{{joined}}}")

    lines.append("}")
    return "\n".join(lines)


def _dot_id(name: str) -> str:
    """Return a DOT identifier, quoting names such as ``optional<T>``."""
    if _PLAIN_ID.match(name) and name.lower() not in DOT_KEYWORDS:
        return name
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
