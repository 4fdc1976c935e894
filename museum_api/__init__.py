"""Museum API Package — Firebase-backed facade for the museum guide app.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
