"""Data contracts for retrieval-augmented chat completions."""

__version__ = "0.1.0"
