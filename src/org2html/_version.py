#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Version information for org2html."""

__version__ = "1.0.0"
