from __future__ import annotations

import pytest

from docdb import Error
from docprobe.status import error_name


@pytest.mark.parametrize(
    "code, name",
    [
        (0, "OK"),
        (1, "CANCELLED"),
        (4, "DEADLINE_EXCEEDED"),
        (5, "NOT_FOUND"),
        (7, "PERMISSION_DENIED"),
        (15, "DATA_LOSS"),
        (16, "UNAUTHENTICATED"),
    ],
)
def test_known_codes(code, name):
    assert error_name(code) == name


def test_accepts_enum_members():
    assert error_name(Error.UNAVAILABLE) == "UNAVAILABLE"


@pytest.mark.parametrize("code", [-1, 17, 99, 123456])
def test_unknown_codes_render_as_numbers(code):
    assert error_name(code) == str(code)


def test_total_and_stable():
    for code in range(-5, 40):
        name = error_name(code)
        assert name
        assert error_name(code) == name
