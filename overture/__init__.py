"""Hash tables, graphs, pools, diagnostics, option parsing, a thread pool and a test harness."""

__version__ = "0.0.1"