"""HTTP surface for the debate engine."""
