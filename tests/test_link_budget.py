import pytest

from rf_link_budget.link_budget import calculate, received_power_dbm, round_half_away
from rf_link_budget.models import LinkBudgetInputs


def test_received_power_example() -> None:
    assert received_power_dbm(20, 10, 120, 2, 15, 1) == pytest.approx(-78.0)


@pytest.mark.parametrize(
    "values",
    [
        (0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
        (60.0, 50.0, 0.0, 0.0, 50.0, 0.0),
        (-30.0, -20.0, 200.0, 50.0, -20.0, 50.0),
        (14.3, 2.15, 98.76, 1.5, 3.0, 0.25),
    ],
)
def test_received_power_matches_sum(values: tuple[float, ...]) -> None:
    tx_power, tx_gain, fsl, misc, rx_gain, rx_loss = values
    expected = tx_power + tx_gain - fsl - misc + rx_gain - rx_loss
    assert received_power_dbm(*values) == pytest.approx(expected, abs=0.005)


def test_rounding_is_half_away_from_zero() -> None:
    assert round_half_away(0.125) == 0.13
    assert round_half_away(-0.125) == -0.13
    assert round_half_away(2.675000001) == 2.68


def test_rounding_does_not_round_up_just_below_half() -> None:
    assert round_half_away(0.49999999999999994, places=0) == 0.0
    assert round_half_away(0.5, places=0) == 1.0
    assert round_half_away(-2.5, places=0) == -3.0


def test_rounding_never_returns_negative_zero() -> None:
    result = received_power_dbm(0.0, 0.0, 0.001, 0.0, 0.0, 0.0)
    assert result == 0.0
    assert str(result) == "0.0"


def test_calculate_uses_model_fields() -> None:
    inputs = LinkBudgetInputs(tx_power=30, tx_gain=6, free_space_loss=100, misc_loss=3, rx_gain=6, rx_loss=2)
    assert calculate(inputs) == pytest.approx(-63.0)


def test_public_helpers_are_documented() -> None:
    from rf_link_budget.cookies import format_set_cookie

    assert calculate.__doc__
    assert format_set_cookie.__doc__
