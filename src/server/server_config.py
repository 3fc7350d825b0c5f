"""Server configuration."""

from __future__ import annotations

# Upper bound on ids accepted in one selection or coverage request.
MAX_SELECTION_IDS = 10_000
