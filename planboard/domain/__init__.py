"""
Domain Layer

Business concepts of the planning board, independent of the HTTP surface.

Components:
- timeline/: Tasks on production lines, timeline windows and lane layout
- shared/: Common domain exceptions
"""
