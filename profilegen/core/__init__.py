"""Fetch, merge and orchestration pipeline."""
