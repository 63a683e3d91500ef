"""Core interfaces.

Protocols implemented by adapters, so the services depend on contracts
rather than on `subprocess` directly.
"""
