"""Core Layer — pure domain logic, no IO, no async, no SDKs.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or schemas/
    - All functions are pure and deterministic
"""
