"""Run only the tests affected by your git changes."""

__version__ = "0.1.0"
