"""
Core codec primitives and domain models.

This module contains the low-level building blocks (byte buffers, radix
conversion, two's complement, base64) that are independent of any I/O.
"""
