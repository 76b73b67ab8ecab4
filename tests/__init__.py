"""
Test suite for fixmat

Contains:
- tests/unit/          : Unit tests for individual modules
"""
