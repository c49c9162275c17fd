"""API routes."""

from . import dashboard, food_log, food_scan, plans, profile

__all__ = ["dashboard", "food_log", "food_scan", "plans", "profile"]
