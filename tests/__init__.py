"""
Test suite for arbint

Contains:
- tests/unit/          : Unit tests for individual modules
"""
