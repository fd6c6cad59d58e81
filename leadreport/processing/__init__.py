"""Filtering, time bucketing, and delta computation for fetched leads."""
from leadreport.processing.bucketing import bucket, parse_created_time, week_of_month
from leadreport.processing.deltas import delta
from leadreport.processing.filters import filter_records, matches
from leadreport.processing.grid import accumulate, build_grid, seed

__all__ = [
    "accumulate",
    "bucket",
    "build_grid",
    "delta",
    "filter_records",
    "matches",
    "parse_created_time",
    "seed",
    "week_of_month",
]
