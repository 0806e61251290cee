"""
Test suite for microns

Contains:
- tests/unit/          : Unit tests for individual modules
"""
