"""Pydantic Schemas — request/response shapes for the HTTP surface.

Invariants:
    - Request fields are optional at the schema level; presence is enforced by
      core/enforce_fields.py so the error names the first missing field
    - Types are still checked: a non-string where a string belongs is a 400
"""
