"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/
    - Every SDK failure is mapped to a MuseumAPIError subclass before it leaves
"""
