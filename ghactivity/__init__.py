"""Print a GitHub user's recent public activity, one line per event."""
