"""Grammar analysis: symbol tables, FIRST and FOLLOW sets, and LR(1) item collections."""

__version__ = "0.1.0"

__all__ = ["cli", "first", "follow", "grammar", "lr1", "symbols"]