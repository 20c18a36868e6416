"""
Stockholm Sauna Directory service.

All functionality lives in submodules under ``app``; SQL migrations and
the seed catalog live under ``db``.
"""

__all__ = []
