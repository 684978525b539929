"""
toolfetch CLI module.

This module provides the command-line interface for toolfetch.
"""

from .parser import CLI, main

__all__ = ["CLI", "main"]
