# quoteflow/__init__.py
"""QuoteFlow: motivational quote studio with simulated narration, music and batch production."""

__version__ = "0.1.0"
