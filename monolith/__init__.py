"""Monolith - production-ready CI/CD scaffolder for GitHub Actions."""

__version__ = "1.0.0"
