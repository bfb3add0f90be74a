"""Configuration, history, search, geometry, annotation and board-data tools for a PCB layout viewer."""

__version__ = "0.1.0"