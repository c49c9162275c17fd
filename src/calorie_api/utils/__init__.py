"""Utility functions."""

from .dates import epoch_millis, local_day, today, utc_now

__all__ = ["epoch_millis", "local_day", "today", "utc_now"]
