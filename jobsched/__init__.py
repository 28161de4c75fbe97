"""jobsched: open a job by number and view its schedule."""

__version__ = "0.1.0"
