"""
Test suite for checkout cart rules

Contains:
- tests/unit/          : Unit tests for individual modules
"""
