#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility helpers for org2html (escaping, I/O, dependency checks)."""
