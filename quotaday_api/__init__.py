"""
Top-level package for the Quotaday API.

Quotaday serves random quotations over HTTP and accepts new ones into
a bounded in-memory store.  The web application lives in ``app``; the
command line entry point is ``quotaday_api.cli``.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
