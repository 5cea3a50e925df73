"""Investment projection engines (pure functions, no I/O)."""
