"""Reusable functional helpers."""

from .fn import apply, for_each, for_each_indexed, for_each_with_source

__all__ = ["apply", "for_each", "for_each_indexed", "for_each_with_source"]
