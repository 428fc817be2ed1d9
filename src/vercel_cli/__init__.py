"""Vercel CLI - manage Vercel deployments, projects, domains and logs from the terminal."""

__version__ = "1.0.0"
