"""Prometheus metrics for MedShare.

Defines operational metrics for the matcher and the transfer workflow.
"""

from prometheus_client import Counter, Histogram

# Matching metrics
match_runs_total = Counter(
    "medshare_match_runs_total",
    "Total number of matcher invocations",
)

matches_found_total = Counter(
    "medshare_matches_found_total",
    "Total number of scored surplus/request pairs produced by the matcher",
)

match_skips_total = Counter(
    "medshare_match_skips_total",
    "Surplus postings or requests skipped during matching",
    ["reason"],  # reason: missing_inventory_item|missing_medicine|missing_clinic|invalid_quantity
)

match_score_histogram = Histogram(
    "medshare_match_score",
    "Match score distribution",
    buckets=[0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 100, 110, 120],
)

match_duration_seconds = Histogram(
    "medshare_match_duration_seconds",
    "Time spent computing matches in seconds",
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
)

# Transfer workflow metrics
transfers_total = Counter(
    "medshare_transfers_total",
    "Transfer status changes",
    ["status"],  # status: Pending|Approved|In Transit|Completed|Rejected
)
