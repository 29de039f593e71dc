"""Services Layer — per-request orchestration around the pure core.

Invariants:
    - Services own logging of recoverable core results
    - Services never cache a working document across calls
"""
