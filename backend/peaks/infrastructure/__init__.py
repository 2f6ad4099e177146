"""Infrastructure Layer - state ownership and process-level concerns.

Invariants:
    - Holds the only mutable application state (the peak catalog)
    - Logging configured here, once, from the application lifespan
"""
