"""Offline sync domain: queued remote mutations and their ports."""
