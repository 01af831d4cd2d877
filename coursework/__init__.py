"""School management system with storage and an interactive menu, plus small text, bit-field, linked-list, formula and prime utilities."""

__version__ = "0.1.0"
__all__ = ["school", "storage", "linkedlist", "cli", "textutils", "bitfields", "formulas", "primes"]