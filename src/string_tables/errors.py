from __future__ import annotations


class StringTablesError(Exception):
    pass


class InvalidInputError(StringTablesError, ValueError):
    """
    Input rejected before any table is built (e.g. pattern longer than text).
    """


class IntegrityError(StringTablesError, RuntimeError):
    """
    An engine produced a result that violates its own correctness guarantee.
    """


class TableIndexError(StringTablesError, IndexError):
    pass
