"""Finances domain module for the productivity backend.

Holds the finance transaction records that the transaction statistics
report measures, and the filters used to select comparable transactions.
"""
