"""JSON exporter for definition graphs (machine-friendly format)."""

import json
from typing import Any, Dict, List

from graph.model import DefinitionGraph


def to_json(
    graph: DefinitionGraph,
    indent: int = 2,
    include_undefined: bool = True,
) -> str:
    """
    Convert a definition graph to JSON format.

    Edges whose target has no definition carry ``"undefined": true``.

    Args:
        graph: The definition graph to export.
        indent: JSON indentation level.
        include_undefined: If True, include edges to undefined type names.

    Returns:
        JSON string representation of the graph.
    """
    edges: List[Dict[str, Any]] = []
    for source, target in graph.iter_edges():
        if graph.is_defined(target):
            edges.append({"source": source, "target": target})
        elif include_undefined:
            edges.append({"source": source, "target": target, "undefined": True})

    data: Dict[str, Any] = {
        "nodes": graph.nodes,
        "edges": edges,
    }

    return json.dumps(data, indent=indent)
