"""
campus_coffee.db.repositories

Repository package.
"""

# Package marker; repositories are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# Repositories are thin; constraint translation and result mapping belong to `services.pos_store`.
