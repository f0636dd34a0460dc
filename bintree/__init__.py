"""Linked binary tree nodes, their measurements, an ASCII renderer and demos."""

__version__ = "0.1.0"
__all__ = ["node", "printing", "demo"]