"""Single source of truth for the abort-if package version."""

__version__: str = "1.0.0"
