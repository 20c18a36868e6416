"""
Pure helpers used by the services and routes: slug generation and
matching, and opening hours evaluation.
"""
