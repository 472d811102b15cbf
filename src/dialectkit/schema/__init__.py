"""
Table model used for DDL generation.
"""

from .table import Column, Index, Table

__all__ = ["Column", "Index", "Table"]
