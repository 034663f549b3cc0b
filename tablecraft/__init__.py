"""Model terminal text tables: cells, rows, columns, constraints and style presets."""

__version__ = "7.2.1"