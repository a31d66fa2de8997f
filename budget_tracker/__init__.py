"""
Budget Tracker - Source Package

A personal finance ledger for a single user: record income and
expense entries, then read back totals, category breakdowns,
sorted listings, a category chart and a monthly report.

DESIGN PRINCIPLES:
1. Entries are immutable once recorded
2. The ledger is append-only
3. Every query is recomputed from the current entries
4. Fail early, fail visibly
5. Every mutation is audited
"""

__version__ = "1.0.0"
__author__ = "Budget Tracker Team"
