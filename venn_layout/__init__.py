"""Venn layout — SAT-based placement of category circles, labels and organizations."""

__version__ = "0.1.0"
