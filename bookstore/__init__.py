"""Terminal bookstore register: book and transaction records in comma-separated files, and an interactive menu."""

__version__ = "0.1.0"
__all__ = ["records", "cli"]