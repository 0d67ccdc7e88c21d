"""VHSA screening API: student roster, screening eligibility and results."""

__version__ = "1.0.0"
