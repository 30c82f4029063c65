from __future__ import annotations

import re

import pytest

from fieldtrack.ids import new_id


def test_new_id_has_prefix_and_hex_token() -> None:
    value = new_id("drv")
    assert re.fullmatch(r"drv-[0-9a-f]{16}", value)


def test_new_id_values_are_unique() -> None:
    ids = {new_id("act") for _ in range(5000)}
    assert len(ids) == 5000


def test_new_id_rejects_empty_prefix() -> None:
    with pytest.raises(ValueError):
        new_id("  ")
