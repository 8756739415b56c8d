"""
Test suite for the radix converter

Contains:
- tests/unit/          : Unit tests for individual modules
"""
