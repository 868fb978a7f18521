from __future__ import annotations

from docdb import Error


def error_name(code: int) -> str:
    """Canonical name of a status code, or its decimal numeral if unknown."""
    try:
        return Error(int(code)).name
    except ValueError:
        return str(int(code))
