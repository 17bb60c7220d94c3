"""Parser and dependency extraction for presentation-language schemas."""

from .parser import parse, ParseError, TrailingDataError
from .dependencies import dependencies
from .comments import strip_comments
from .builder import build_graph, build_graph_from_files, load_definitions

__all__ = [
    "parse",
    "ParseError",
    "TrailingDataError",
    "dependencies",
    "strip_comments",
    "build_graph",
    "build_graph_from_files",
    "load_definitions",
]
