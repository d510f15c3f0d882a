"""
Test suite for verhoeff_checksum

Contains:
- tests/unit/          : Unit tests for individual modules
"""
