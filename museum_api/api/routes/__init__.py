"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with tags
    - Every handler validates first, then calls exactly one collaborator
    - Routes never talk to SDKs directly (collaborators come from dependencies)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
