"""
Core domain models, geometric primitives, and invariants.

This module contains the foundational building blocks that are independent
of any caller (CLI, file formats, etc.).
"""
