from __future__ import annotations

import pytest

from sysfile.core.sizes import SIZE_UNITS, human_size


@pytest.mark.parametrize(
    "size, precision, expected",
    [
        (0, 1, "0 bytes"),
        (13, 1, "13 bytes"),
        (1023, 1, "1023 bytes"),
        (1024, 1, "1K"),
        (1536, 1, "1.5K"),
        (4562154, 2, "4.35M"),
        (98543246875, 1, "91.8G"),
        (1024 ** 4, 1, "1T"),
        (1024 ** 8, 1, "1Y"),
    ],
)
def test_human_size_examples(size: int, precision: int, expected: str) -> None:
    assert human_size(size, precision) == expected


def test_human_size_default_precision() -> None:
    assert human_size(98543246875) == "91.8G"


def test_human_size_moves_up_just_below_boundary() -> None:
    # 1048575 / 1024 = 1023.999..., and 1023.999 + 1 > 1024
    assert human_size(1024 * 1024 - 1) == "1M"


def test_human_size_rounds_half_up() -> None:
    # 1280 / 1024 = 1.25
    assert human_size(1280, 1) == "1.3K"
    assert human_size(1280, 2) == "1.25K"
    assert human_size(1280, 0) == "1K"


def test_human_size_clamps_at_largest_unit() -> None:
    assert human_size(1024 ** 9) == "1024Y"
    assert human_size(1024 ** 10).endswith("Y")


@pytest.mark.parametrize("size", [0, 1, 999, 1024, 10 ** 6, 10 ** 12, 10 ** 20, 10 ** 30])
def test_human_size_has_exactly_one_unit(size: int) -> None:
    text = human_size(size, 2)
    assert not text.startswith("-")
    assert sum(text.endswith(unit) for unit in SIZE_UNITS) == 1


def test_human_size_rejects_negative() -> None:
    with pytest.raises(ValueError):
        human_size(-1)


def test_human_size_beyond_float_range() -> None:
    text = human_size(10 ** 400)
    assert text.endswith("Y")
    assert text[:-1].isdigit()
    assert len(text[:-1]) == len(str(10 ** 400 // 1024 ** 8))
