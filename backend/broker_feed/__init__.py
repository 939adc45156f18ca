"""Broker policy feed — standardizes and aggregates policy data from two brokers."""

__version__ = "0.1.0"
