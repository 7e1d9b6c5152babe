"""
Core algebra, parameter models, and invariants.

This module contains the foundational building blocks that are independent
of the protocol driver and the CLI.
"""
