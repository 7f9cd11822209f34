"""
campus_coffee.domain

Domain layer: the POS value object, result/error variants and the data port.

Responsibilities:
- Stay independent of SQLAlchemy and FastAPI; adapters depend on this package.
"""

# Package marker; import from submodules directly.


# --- Module Notes -----------------------------------------------------------
# `domain.ports.PosDataService` is the contract implemented by `services.pos_store`.
