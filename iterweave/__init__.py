"""Iterator adaptors and helpers: combinations, interleaving, deduplication,
result-aware adaptors, lazy formatting, and a small iris plotting command."""

__version__ = "0.1.0"