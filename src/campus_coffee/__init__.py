"""
campus_coffee

Top-level package for the Campus Coffee point-of-sale persistence service.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep this file free of imports; the API, store and migrations all import it.
