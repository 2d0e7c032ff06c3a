"""
Test suite for chronostore

Contains:
- tests/unit/          : Unit tests for individual modules
"""
