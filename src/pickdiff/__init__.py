"""pickdiff.

Line-numbered diffs between two git revisions for a chosen set of files,
rendered as unified text, Markdown, HTML or JSON.
"""

__version__ = "1.0.0"
__author__ = "pickdiff contributors"

__all__ = ["__version__"]
