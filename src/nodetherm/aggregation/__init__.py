"""Aggregation module for node thermal summaries.

- Assembles per-dimension profiles into one node summary
- Forbidden: measurement, DB access, wire transport
"""
