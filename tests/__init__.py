"""
Test suite for pvcodec

Contains:
- tests/unit/          : Unit tests for individual codec modules
"""
