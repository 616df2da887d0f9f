"""Building blocks for an XSS scanner: options, logging, PoCs, reports and checks."""

__version__ = "2.10.0"

__all__ = [
    "analysis",
    "codeview",
    "foundaction",
    "lib",
    "logger",
    "model",
    "poc",
    "ratelimit",
    "report",
    "utils",
    "verification",
]