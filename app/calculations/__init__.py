"""
Launch Estimate Calculation Engine

Pure calculation modules for short-term-rental launch packages: currency
conversion, package profiles, investment breakdown and profit/ROI
projections. Nothing in this package performs I/O.
"""

from app.calculations import currency, packages, investment, profit, estimate

__all__ = ["currency", "packages", "investment", "profit", "estimate"]
