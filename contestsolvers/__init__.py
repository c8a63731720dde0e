"""Solutions to classic programming-contest problems, with a small command-line runner."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "arrays", "cli", "gym", "strings", "tap"]