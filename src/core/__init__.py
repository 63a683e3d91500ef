"""Core: configuration, domain records, contracts and the publish service."""
