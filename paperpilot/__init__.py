"""PaperPilot: interest-driven paper and researcher search backend."""

__version__ = "0.1.0"
