"""Core building blocks for til.

    - config: Application configuration management
    - console: Rich console output and logging
    - result / errors: Ok/Err values and the note error taxonomy
    - paths: Date-partitioned note path resolution
    - frontmatter: Note header rendering and tag merging
    - notes_impl: Appending entries to a note file
"""

from __future__ import annotations
