"""Layout constants.

Centralizes the magic numbers used by automatic node placement.
"""

# ---------------------------------------------------------------------------
# Automatic placement (nodes without explicit coordinates)
# ---------------------------------------------------------------------------
LAYER_SPACING: float = 200.0
"""Distance between consecutive layers along the flow axis."""

TRACK_SPACING: float = 100.0
"""Distance between nodes of the same layer across the flow axis."""

X_OFFSET: float = 40.0
"""Left margin of the first automatically placed node."""

Y_OFFSET: float = 40.0
"""Top margin of the first automatically placed node."""
