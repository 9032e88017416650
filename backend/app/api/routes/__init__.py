"""Route Modules — one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Every resource router requires a staff identity; only health is public
    - Routes never contain business logic (delegate to services/)
"""
