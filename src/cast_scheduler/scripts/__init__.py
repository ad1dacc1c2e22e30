"""Operational scripts for the Cast Scheduler."""
