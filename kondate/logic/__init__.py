"""Core business logic layer.

Subpackages:
- menu: candidate filtering, inventory reconciliation, the local planner and plan editing
- shopping: aggregating a plan into a shopping list
- inventory: stock bookkeeping after cooking / shopping, remote request hints
"""
__all__ = ["menu", "shopping", "inventory"]
