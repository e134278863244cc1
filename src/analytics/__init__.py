"""Analytics workloads for deriving insights from data.

Separate from ingestion pipelines - focuses on:
- Descriptive catalog insights (counts, rankings, shares)
- Aggregations and derived datasets

Design principle: Analytics depends on pipelines (upstream data),
but pipelines should never depend on analytics (downstream insights).
"""
