"""til - keep track of the things you learned today.

This package provides the `til` command-line tool, which appends short notes
to one markdown file per day and keeps a small front-matter header of tags
at the top of each file.

Exports:
    __version__: Package version string.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
