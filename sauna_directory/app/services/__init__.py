"""
Service layer abstraction.

Each service encapsulates the row store queries for one table so that
API handlers never build queries themselves.
"""
