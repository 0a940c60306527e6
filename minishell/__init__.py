"""Interactive shell front end: tokenizer, syntax checks and pipeline parsing."""

__version__ = "0.1.0"