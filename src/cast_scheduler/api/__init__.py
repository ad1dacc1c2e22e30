"""HTTP API for the Cast Scheduler."""
