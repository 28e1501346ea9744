"""Services Layer — async orchestration around the pure core.

Invariants:
    - Services own every await point; core/ stays synchronous
    - No shared mutable state: concurrent derivations need no locks
"""
