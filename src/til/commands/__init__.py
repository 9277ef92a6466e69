"""CLI command modules for til.

    - notes: storing note entries
"""

from __future__ import annotations
