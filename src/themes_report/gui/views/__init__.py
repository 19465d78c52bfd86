"""Qt widgets hosting report tables."""
