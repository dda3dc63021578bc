"""
Core value types, digit arithmetic, and serialization contracts.

This package is self-contained: it has no I/O and no dependencies on
external systems.
"""
