"""Competitive-programming algorithms and data structures: range queries, DP, graphs and flows."""

__version__ = "0.1.0"