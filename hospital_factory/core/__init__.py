"""Core settings and logging shared across the package."""
