"""
Writer
======

Log - ordered record of failure reasons collected while a combinator runs.
"""

from .log import Log

__all__ = ("Log",)
