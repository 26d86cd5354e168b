"""Composable dataflow blocks for lines, hex, JSON, CSV, text and standard streams."""

__version__ = "0.1.0"