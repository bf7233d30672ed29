"""
Custom exceptions for dotgraph.
"""

class DotGraphError(Exception):
    """Base exception for all dotgraph errors."""
    pass

class InvalidNodeNameError(DotGraphError, ValueError):
    """Identifier rejected by the node name validator."""

    def __init__(self, name: str, reason: str):
        super().__init__(f"{reason}: {name!r}")
        self.name = name
        self.reason = reason

class GraphError(DotGraphError):
    """Graph operation failed."""
    pass

class DefinitionLoadError(DotGraphError):
    """Failed to load or validate a graph definition."""
    pass

class ExportError(DotGraphError):
    """Writing DOT output failed."""
    pass
