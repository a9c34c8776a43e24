"""Graph building utilities."""

from src.graph.node_mapping import MappingFrozenError, NodeMapping

__all__ = ["MappingFrozenError", "NodeMapping"]
