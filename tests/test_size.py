from __future__ import annotations

import pytest

from fontrun.core.size import Size, Size2D


def test_unit_conversions_round_trip_through_points() -> None:
    assert Size.inches(1).to_pt() == pytest.approx(72.0)
    assert Size.mm(25.4).to_pt() == pytest.approx(72.0)
    assert Size.cm(2.54).to_inches() == pytest.approx(1.0)
    assert Size.pt(36).to_mm() == pytest.approx(12.7)


def test_arithmetic() -> None:
    total = Size.pt(1.5) + Size.pt(2.5)

    assert total == Size.pt(4)
    assert total - Size.pt(1) == Size.pt(3)
    assert -total == Size.pt(-4)
    assert total * 2 == Size.pt(8)
    assert 0.5 * total == Size.pt(2)
    assert total / 4 == Size.pt(1)
    assert Size.zero() < total
    assert str(total) == "4pt"


def test_size_does_not_mix_with_plain_numbers() -> None:
    with pytest.raises(TypeError):
        Size.pt(1) + 1  # type: ignore[operator]
    with pytest.raises(TypeError):
        Size.pt(1) * Size.pt(2)  # type: ignore[operator]


def test_size2d() -> None:
    combined = Size2D(Size.pt(1), Size.pt(2)) + Size2D(Size.pt(3), Size.pt(4))

    assert combined == Size2D(Size.pt(4), Size.pt(6))
    assert Size2D.zero() == Size2D()
    assert str(combined) == "[4pt, 6pt]"
