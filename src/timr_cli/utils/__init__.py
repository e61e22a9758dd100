"""Shared helpers: time/date arithmetic, clock, logging, CLI plumbing."""
