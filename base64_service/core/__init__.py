"""Core Layer — pure codec logic and the error hierarchy, no IO, no async.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - All functions are pure and deterministic
"""
