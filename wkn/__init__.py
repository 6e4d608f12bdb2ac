"""
WKN: Persistent Integer-Array Store

A small single-process store that maps names to ordered lists of
integers, persisted to a snapshot file and driven from an interactive
command shell.
"""

__version__ = "1.0.0"
