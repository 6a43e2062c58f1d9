"""
Test suite for polycut

Contains:
- tests/unit/          : Unit tests for geometry, cutting pipeline, contracts and CLI
"""
