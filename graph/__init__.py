"""Graph data model for definition dependencies."""

from .model import DefinitionGraph

__all__ = ["DefinitionGraph"]
