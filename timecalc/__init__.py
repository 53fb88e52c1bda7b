"""Time range calculator: parse pasted time ranges, total them, score them and render a summary."""

__version__ = "0.1.0"
