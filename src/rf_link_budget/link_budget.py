"""Received power calculation."""

from __future__ import annotations

import math

from .models import LinkBudgetInputs


def round_half_away(value: float, places: int = 2) -> float:
    """Round to ``places`` decimals with ties away from zero (C ``round``)."""

    scale = 10.0**places
    scaled = abs(value) * scale
    whole = math.floor(scaled)
    # Compare the fraction instead of adding 0.5, which can round up on its own.
    if scaled - whole >= 0.5:
        whole += 1
    # Adding 0.0 turns -0.0 into 0.0.
    return math.copysign(whole, value) / scale + 0.0


def received_power_dbm(
    tx_power: float,
    tx_gain: float,
    free_space_loss: float,
    misc_loss: float,
    rx_gain: float,
    rx_loss: float,
) -> float:
    """Received power in dBm, rounded to two decimals.

    Pr = Pt + Gt - FSL - Lmisc + Gr - Lr
    """
    return round_half_away(tx_power + tx_gain - free_space_loss - misc_loss + rx_gain - rx_loss)


def calculate(inputs: LinkBudgetInputs) -> float:
    """Received power in dBm for already validated inputs."""

    return received_power_dbm(
        inputs.tx_power,
        inputs.tx_gain,
        inputs.free_space_loss,
        inputs.misc_loss,
        inputs.rx_gain,
        inputs.rx_loss,
    )
