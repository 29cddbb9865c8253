"""Bounded-length text reduction with per-character word limit policies."""
