"""Exporters for converting graph to various output formats."""

from .gml_exporter import to_gml
from .gv_exporter import to_gv
from .mermaid_exporter import to_mermaid
from .json_exporter import to_json

__all__ = ["to_gml", "to_gv", "to_mermaid", "to_json"]
