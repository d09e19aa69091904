"""Analytics domain module for the productivity backend.

This domain turns already-fetched task, tag and transaction records into
aggregate statistics.

Key Components:
- Statistics Engine: trimmed mean and deviation percent over a numeric field
- Task Grouping: per-day buckets with completed/todo/all summaries
- Period Filter: restriction of day buckets to the current week, month or year
"""
