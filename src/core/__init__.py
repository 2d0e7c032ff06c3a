"""
Core domain models, temporal primitives, and invariants.

This module contains the foundational building blocks that are independent
of external systems (object storage, clocks, etc.).
"""
