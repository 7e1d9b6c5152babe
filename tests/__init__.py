"""
Test suite for neutrosophic-zkp

Contains:
- tests/unit/          : Unit tests for algebra, generation, protocol and CLI
"""
