"""StrideStat: running dashboard over the SportSee backend."""
