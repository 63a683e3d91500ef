"""Services orchestrating the domain."""
