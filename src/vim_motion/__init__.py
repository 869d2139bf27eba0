"""Vi-style cursor motion arithmetic over read-only line buffers."""

__all__ = [
    "adapters",
    "buffer",
    "config",
    "engine",
    "motion",
    "runtime",
]

__version__ = "0.1.0"
