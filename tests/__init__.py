"""
Test suite for arris-potd

Contains:
- tests/unit/          : Unit tests for individual modules and the CLI
"""
