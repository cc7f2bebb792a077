"""Shared pytest configuration."""

import os

# Headless backend for plotting tests
os.environ.setdefault("MPLBACKEND", "Agg")
