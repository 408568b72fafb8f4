"""Per-frame hand animation: frame gating, second-hand phases, hand angles."""
