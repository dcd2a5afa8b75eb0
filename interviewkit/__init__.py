"""Interview algorithms, design patterns and thread-based concurrency helpers."""

__version__ = "0.1.0"