"""
Test suite for termcalc

Contains:
- tests/unit/          : Unit tests for individual modules
"""
