"""Services Layer — repositories, slug resolution and relationship synchronization.

Invariants:
    - Repositories are the only writers of their tables
    - Each write operation commits exactly once

Design Decisions:
    - CatalogRepository owns both artworks and exhibitions so the link between
      them has a single owner
"""
