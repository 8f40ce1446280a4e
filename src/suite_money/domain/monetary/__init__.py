"""Monetary domain package.

This package contains the exact decimal Money value type, currency metadata and its
process-wide cache, money families (configuration), the float precision-safety rules and
locale-aware formatting.
"""
