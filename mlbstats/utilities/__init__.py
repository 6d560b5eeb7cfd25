"""Shared utilities."""

from mlbstats.utilities.retry import with_retry

__all__ = ["with_retry"]
