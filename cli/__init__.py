"""
Command-line entry points for pair analysis.

Provides command-line interfaces for:
- Two-instrument correlation / ratio analysis from vendor exports
"""
