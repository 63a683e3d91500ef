"""Adapters to the outside world: processes and the filesystem."""
