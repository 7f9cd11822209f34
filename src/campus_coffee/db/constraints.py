"""
campus_coffee.db.constraints

Translation of database integrity violations into domain errors.

Responsibilities:
- Enumerate the constraints the store knows how to translate.
- Match a violation against those constraints by message token.
- Build the corresponding domain error, or report "unknown" so the caller re-raises.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError

from campus_coffee.db.models import POS_NAME_CONSTRAINT
from campus_coffee.domain.errors import DuplicatePosName, PosError
from campus_coffee.domain.models import Pos


@dataclass(frozen=True, slots=True)
class ConstraintRule:
    """
    A known constraint and the strings that identify it in driver messages.

    PostgreSQL reports the constraint name; SQLite only reports the columns,
    so each rule lists every form it may appear in.
    """

    constraint: str
    tokens: tuple[str, ...]
    build_error: Callable[[Pos], PosError]


CONSTRAINT_RULES: tuple[ConstraintRule, ...] = (
    ConstraintRule(
        constraint=POS_NAME_CONSTRAINT,
        tokens=(POS_NAME_CONSTRAINT, "UNIQUE constraint failed: pos.name"),
        build_error=lambda pos: DuplicatePosName(pos.name),
    ),
)


def root_cause(exc: BaseException) -> BaseException | None:
    """
    Return the innermost exception behind `exc`, or None if it wraps nothing.

    SQLAlchemy keeps the DBAPI error on `.orig`; async drivers chain the
    native driver error behind that via `__cause__`.
    """

    cause = getattr(exc, "orig", None) or exc.__cause__
    if cause is None:
        return None
    seen = {id(exc)}
    while id(cause) not in seen:
        seen.add(id(cause))
        nxt = cause.__cause__
        if nxt is None:
            break
        cause = nxt
    return cause


def _messages(exc: IntegrityError) -> Iterator[str]:
    yield str(exc)
    cause = root_cause(exc)
    if cause is not None:
        yield str(cause)


def match_constraint(exc: IntegrityError) -> ConstraintRule | None:
    for message in _messages(exc):
        for rule in CONSTRAINT_RULES:
            if any(token in message for token in rule.tokens):
                return rule
    return None


def translate_integrity_error(exc: IntegrityError, pos: Pos) -> PosError | None:
    """
    Map `exc` to a domain error for `pos`, or None when it matches no known
    constraint (the caller must then propagate `exc` unchanged).
    """

    rule = match_constraint(exc)
    if rule is None:
        return None
    return rule.build_error(pos)


# --- Module Notes -----------------------------------------------------------
# Token matching depends on driver message formats. A driver that wraps errors
# without exposing the constraint name or column list yields a false negative
# (the raw IntegrityError propagates); add its token to CONSTRAINT_RULES.
