"""Export module."""
from .loader import load_definition, build_graph
from .writer import write_dot

__all__ = ['load_definition', 'build_graph', 'write_dot']
