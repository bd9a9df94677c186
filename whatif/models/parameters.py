"""Input models for what-if simulations."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ContributionFrequency(IntEnum):
    """Supported contribution schedules (payments per year)."""

    MONTHLY = 12
    WEEKLY = 52
    DAILY = 365

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_name(cls, name: str) -> "ContributionFrequency":
        """Resolve a frequency from its name (``"monthly"``) or period count (``"12"``)."""
        text = str(name).strip()
        if text.isdigit():
            return cls(int(text))
        try:
            return cls[text.upper()]
        except KeyError as exc:
            raise ValueError(f"Unsupported contribution frequency: {name!r}") from exc


class SimulationParameters(BaseModel):
    """
    Immutable description of one simulation request.

    Range checks (non-negative amount, positive horizon, supported frequency)
    are applied by the simulation core, which reports them as
    ``InvalidParameters`` before any work begins.
    """

    model_config = ConfigDict(frozen=True)

    amount: float = Field(..., description="Lump sum, or per-period contribution when recurring")
    recurring: bool = Field(False, description="Whether the amount is contributed every period")
    frequency: Union[int, float] = Field(
        ContributionFrequency.MONTHLY,
        description="Contribution periods per year (12, 52 or 365)",
    )
    years: Union[int, float] = Field(..., description="Investment horizon in whole years")
    use_historical: bool = Field(
        False, description="Bootstrap annual returns from the historical series"
    )
    fixed_rate: float = Field(
        0.0, description="Annual return (decimal) used when not sampling history"
    )

    @property
    def frequency_label(self) -> str:
        """Human-readable contribution schedule (Daily/Weekly/Monthly)."""
        try:
            return ContributionFrequency(self.frequency).label
        except ValueError:
            return f"{self.frequency}x per year"


class AdjustmentSettings(BaseModel):
    """Post-processing toggles for inflation and end-of-horizon tax."""

    model_config = ConfigDict(frozen=True)

    inflation_enabled: bool = False
    inflation_rate: float = Field(0.0, description="Annual inflation (decimal)")
    tax_enabled: bool = False
    tax_rate: float = Field(0.0, description="Tax on realised gains (decimal)")

    def effective_inflation(self) -> Optional[float]:
        """Return the inflation rate to apply, or ``None`` when disabled."""
        return float(self.inflation_rate) if self.inflation_enabled else None

    def effective_tax(self) -> Optional[float]:
        """Return the tax rate to apply, or ``None`` when disabled."""
        return float(self.tax_rate) if self.tax_enabled else None


__all__ = ["ContributionFrequency", "SimulationParameters", "AdjustmentSettings"]
