"""Calorie tracking API: food photo recognition and meal planning."""

__version__ = "1.0.0"
