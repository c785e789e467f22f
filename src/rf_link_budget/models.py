"""Pydantic models for validation and persistence."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LinkBudgetInputs(BaseModel):
    """Validated link budget parameters (dB / dBm).

    Field order is the order in which form values are checked, ``title`` is the
    name shown in error messages, and ``ge``/``le`` are the accepted bounds.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    tx_power: float = Field(title="Transmit Power", ge=-30.0, le=60.0)
    tx_gain: float = Field(title="Transmit Antenna Gain", ge=-20.0, le=50.0)
    free_space_loss: float = Field(title="Free Space Loss", ge=0.0, le=200.0)
    misc_loss: float = Field(title="Miscellaneous Loss", ge=0.0, le=50.0)
    rx_gain: float = Field(title="Receiver Antenna Gain", ge=-20.0, le=50.0)
    rx_loss: float = Field(title="Receiver Loss", ge=0.0, le=50.0)


class SessionRecord(BaseModel):
    """On-disk representation of a session."""

    model_config = ConfigDict(extra="ignore")

    data: dict[str, str] = Field(default_factory=dict)
    last_accessed: float
