"""Classification of driver-level integrity errors."""

from sqlalchemy.exc import IntegrityError

UNIQUE_VIOLATION_SQLSTATE = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """True when the store rejected a row because of a unique constraint.

    Covers psycopg2/psycopg (``pgcode``/``sqlstate``), asyncpg as adapted by
    SQLAlchemy (``sqlstate``) and sqlite3 (error name or message).
    """
    orig = exc.orig
    for attr in ("pgcode", "sqlstate"):
        if getattr(orig, attr, None) == UNIQUE_VIOLATION_SQLSTATE:
            return True

    errorname = getattr(orig, "sqlite_errorname", None)
    if errorname is not None:
        return errorname == "SQLITE_CONSTRAINT_UNIQUE"
    return str(orig).startswith("UNIQUE constraint failed")
