"""Inventory reconciliation module."""
from .reconciler import build_digest_index, diff_inventories
from .report import DiffReport, format_report

__all__ = ["build_digest_index", "diff_inventories", "DiffReport", "format_report"]
