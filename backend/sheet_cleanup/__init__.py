"""
Sheet cleanup back-end.

Accepts an uploaded CSV or Excel workbook, cleans a user-selected subset of
columns and returns the result as CSV or XLSX.
"""

__version__ = "0.1.0"
