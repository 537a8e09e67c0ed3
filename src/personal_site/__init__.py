"""
Personal Site - blog and TIL content collections with an RSS feed.

This package loads the ``blog`` and ``til`` content collections, validates
their front matter and serves them, merged and sorted, as an RSS 2.0 feed.
"""

__version__ = "0.1.0"
