"""
Test suite for maths

Contains:
- tests/unit/          : Unit tests for the Complex type, safeguards and contracts
"""
