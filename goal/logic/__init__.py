"""Core business logic layer.

Subpackages:
- planning: date range arithmetic and calendar report construction
"""
__all__ = ["planning"]
