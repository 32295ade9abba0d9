"""
Test suite for interlude

Contains:
- tests/unit/          : Unit tests for individual modules
"""
