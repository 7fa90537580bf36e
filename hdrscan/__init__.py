"""Scan C headers for includes, function declarations, structs and #define directives."""

__version__ = "0.1.0"