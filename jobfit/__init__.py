"""jobfit: rank job postings for candidates by weighted profile fit."""

__version__ = "0.1.0"
