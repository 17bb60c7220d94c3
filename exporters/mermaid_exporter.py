"""Mermaid flowchart exporter for definition graphs."""

import re
from typing import Dict, List, Set

from graph.model import DefinitionGraph


UNDEFINED_STYLE = "stroke:#999999,stroke-dasharray: 5 5"


def to_mermaid(
    graph: DefinitionGraph,
    orientation: str = "LR",
    include_undefined: bool = True,
) -> str:
    """
    Convert a definition graph to Mermaid flowchart syntax.

    Args:
        graph: The definition graph to export.
        orientation: Flowchart orientation (LR, TD, TB, RL, BT).
        include_undefined: If True, show referenced names that have no
            definition (primitive or external types) as dashed nodes.

    Returns:
        Mermaid flowchart string.
    """
    lines = [f"flowchart {orientation}"]

    taken: Set[str] = set()
    node_ids = _assign_ids(graph.nodes, "", taken)
    undefined_ids: Dict[str, str] = {}
    if include_undefined:
        undefined_ids = _assign_ids(sorted(graph.get_undefined()), "type_", taken)

    for name in graph.nodes:
        lines.append(f'    {node_ids[name]}["{_label(name)}"]')

    if undefined_ids:
        lines.append("")
        lines.append("    %% Undefined types")
        for name in sorted(undefined_ids):
            undefined_id = undefined_ids[name]
            lines.append(f'    {undefined_id}["{_label(name)}"]')
            lines.append(f"    style {undefined_id} {UNDEFINED_STYLE}")

    lines.append("")
    for source, target in graph.iter_edges():
        if target in node_ids:
            lines.append(f"    {node_ids[source]} --> {node_ids[target]}")
        elif target in undefined_ids:
            lines.append(f"    {node_ids[source]} -.-> {undefined_ids[target]}")

    return "\n".join(lines)


def _assign_ids(names: List[str], prefix: str, taken: Set[str]) -> Dict[str, str]:
    """Give every name a Mermaid id not already in ``taken``."""
    ids: Dict[str, str] = {}
    for name in names:
        candidate = _sanitize_id(prefix + name)
        node_id = candidate
        counter = 2
        while node_id in taken:
            node_id = f"{candidate}_{counter}"
            counter += 1
        taken.add(node_id)
        ids[name] = node_id
    return ids


def _sanitize_id(value: str) -> str:
    """
    Sanitize a string to be a valid Mermaid ID.

    Mermaid IDs can only contain letters, digits, and underscores.
    """
    sanitized = re.sub(r"[<>.\-\s]", "_", value)
    sanitized = re.sub(r"[^a-zA-Z0-9_]", "", sanitized)
    # Ensure it starts with a letter
    if sanitized and not sanitized[0].isalpha():
        sanitized = "n_" + sanitized
    return sanitized or "unknown"


def _label(name: str) -> str:
    """Escape a name for use inside a quoted Mermaid label."""
    return name.replace('"', "#quot;").replace("<", "#lt;").replace(">", "#gt;")
