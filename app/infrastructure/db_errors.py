"""Storage-engine agnostic inspection of persistence errors."""

from sqlalchemy.exc import IntegrityError

# SQLSTATE class 23, unique_violation
UNIQUE_VIOLATION_SQLSTATE = "23505"


def _sqlstate(error: IntegrityError) -> str | None:
    orig = error.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def is_unique_violation(error: BaseException) -> bool:
    """Check whether a persistence failure is a uniqueness-constraint violation.

    Drivers that report SQLSTATE (asyncpg, psycopg) are matched on the code;
    SQLite has none and is matched on its message.

    Args:
        error: Exception raised by the persistence layer.

    Returns:
        True if the error is a unique-constraint violation.
    """
    if not isinstance(error, IntegrityError):
        return False

    code = _sqlstate(error)
    if code:
        return code == UNIQUE_VIOLATION_SQLSTATE

    return "UNIQUE constraint failed" in str(error.orig)


def error_detail(error: BaseException) -> str:
    """Extract the store's human-readable detail from a persistence error.

    asyncpg puts "Key (title)=(...) already exists." on the wrapped driver
    exception; other drivers only have the message.

    Args:
        error: Exception raised by the persistence layer.

    Returns:
        Detail text.
    """
    orig = getattr(error, "orig", None)
    if orig is None:
        return str(error)

    for candidate in (orig, getattr(orig, "__cause__", None)):
        detail = getattr(candidate, "detail", None)
        if detail:
            return str(detail)

    return str(orig)
