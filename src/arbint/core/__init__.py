"""
Core arithmetic: word primitives, magnitude engine, signed wrapper.

This module is self-contained and has no I/O beyond the JSON contracts.
"""
