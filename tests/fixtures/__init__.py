"""
Shared test fixtures and utilities for trendmaps tests.

This package provides:
- trends_payloads: sample explore and comparedgeo payloads matching the
  Google Trends wire format
"""

from tests.fixtures import trends_payloads

__all__ = ["trends_payloads"]
