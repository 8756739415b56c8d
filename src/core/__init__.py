"""
Core domain models, numeral arithmetic, and contracts.

This module contains the pure building blocks of the converter: no I/O,
no shared mutable state, safe to call from any thread.
"""
