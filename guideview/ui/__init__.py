"""Terminal UI for guideview."""
