"""
Version 1 of the directory API.
"""
