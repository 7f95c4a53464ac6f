"""
Core domain models, constants, and arithmetic primitives.

This package contains the fixed tables, value types, and error values that
the derivation pipeline and the seed cipher are built on.
"""
