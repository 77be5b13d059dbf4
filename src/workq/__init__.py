"""workq — in-process unit-of-work queue with lifetime accounting."""

__version__ = "0.1.0"
