"""
Test suite for fluent

Contains:
- tests/unit/          : Unit tests for individual modules
"""
