"""Formatting helpers shared by CLI and GUI."""

from .convert_utils import ConvertUtils

__all__ = ["ConvertUtils"]
