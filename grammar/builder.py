"""Graph builder that orchestrates loading, parsing and graph construction."""

import logging
from pathlib import Path
from typing import Iterable, List

from graph.model import DefinitionGraph
from .comments import strip_comments
from .dependencies import dependencies
from .nodes import Definition
from .parser import parse


logger = logging.getLogger(__name__)


def load_definitions(path: Path) -> List[Definition]:
    """
    Read a schema file, strip its comments and parse it.

    Args:
        path: Schema file to read (UTF-8).

    Returns:
        The file's top-level definitions in source order.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
        ParseError: If the text is not a valid schema.
    """
    raw = path.read_text(encoding="utf-8")
    definitions = parse(strip_comments(raw))
    logger.debug("Parsed %d definition(s) from %s", len(definitions), path)
    return definitions


def build_graph(definitions: Iterable[Definition]) -> DefinitionGraph:
    """
    Build a dependency graph with one node per definition.

    Args:
        definitions: Parsed definitions, in the order nodes should appear.

    Returns:
        DefinitionGraph with an edge for every referenced type name.
    """
    graph = DefinitionGraph()

    for definition in definitions:
        graph.add_definition(definition.name, dependencies(definition))

    return graph


def build_graph_from_files(paths: Iterable[Path]) -> DefinitionGraph:
    """
    Load several schema files and build a single graph over all of them.

    Args:
        paths: Schema files, read in order.

    Returns:
        DefinitionGraph over every definition found.
    """
    definitions: List[Definition] = []
    for path in paths:
        definitions.extend(load_definitions(path))

    graph = build_graph(definitions)
    logger.debug("Built %r", graph)
    return graph
