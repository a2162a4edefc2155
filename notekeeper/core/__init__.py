"""
Core Package.

Configuration, logging, exceptions and the durable store.
"""
