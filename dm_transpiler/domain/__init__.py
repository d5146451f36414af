"""Domain layer.

Pure, in-memory DM transformation logic. Nothing in this package performs
I/O, reads configuration or logs.
"""
