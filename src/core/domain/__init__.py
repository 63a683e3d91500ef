"""Domain models and errors.

Only plain data lives here: what a publish run did, and how it failed.
Nothing in this package spawns processes or touches the filesystem.
"""
