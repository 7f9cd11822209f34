"""
campus_coffee.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide the ORM model, engine/session setup, entity mapping, integrity-error
  translation and the POS repository.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing outside `db` and `services.pos_store` should import SQLAlchemy models directly.
