"""Monetary domain package.

This package contains the currency definitions and the generic fixed-point Amount
that stores every value as an exact integer count of smallest units.
"""
