"""HTTP surface for the read-aloud scoring engine."""
