"""
Core infrastructure: configuration, logging, row store access and
database helpers.
"""
