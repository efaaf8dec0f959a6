"""Support utilities for building compilers and compiler tools."""

__version__ = "0.1.0"