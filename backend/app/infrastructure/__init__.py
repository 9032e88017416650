"""Infrastructure Layer — database sessions, token verification and logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Driver and library exceptions mapped to MuseumError subclasses at this boundary
"""
