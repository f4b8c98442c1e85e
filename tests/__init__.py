"""
Test suite for safe_decimal

Contains:
- tests/unit/          : Unit tests for individual modules
"""
