"""Capital-gains tax comparison core: old (indexed, 20%) vs new (flat, 12.5%) regime."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from config import BASE_PRICE, NEW_TAX_RATE, OLD_TAX_RATE

logger = logging.getLogger(__name__)

OLD_REGIME_MESSAGE = "Old tax system remains more advantageous throughout the selected holding period."
NEW_REGIME_MESSAGE = "New tax system remains more advantageous throughout the selected holding period."


# =============================================================================
# DATA STRUCTURES
# =============================================================================
@dataclass(frozen=True)
class YearRecord:
    """Tax position if the property is sold after `year` years."""
    year: int
    old_tax: float
    new_tax: float
    indexed_cost: float
    sell_price: float


@dataclass(frozen=True)
class TaxSummary:
    """Narrative facts shown under the chart."""
    has_crossover: bool
    year: int
    sell_price: float
    indexed_cost: float
    old_tax: float
    new_tax: float
    favored_regime: Optional[str]  # "old" / "new" when there is no crossover
    message: str


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================
def _floor_at_zero(value: float) -> float:
    # max(0, nan) returns 0 in Python, which would hide a bad input
    if math.isnan(value):
        return value
    return value if value > 0 else 0.0


def format_inr(value: float) -> str:
    """Format a rupee amount with Indian digit grouping (1,00,00,000)."""
    if not math.isfinite(value):
        return f"₹{value}"
    sign = "-" if value < 0 else ""
    digits = str(int(round(abs(value))))
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    groups.append(tail)
    return f"{sign}₹{','.join(groups)}"


# =============================================================================
# CORE CALCULATIONS
# =============================================================================
def compute_series(price_multiplier: float, indexation_rate: float, holding_years: int) -> list[YearRecord]:
    """
    Tax under both regimes for every year from 0 to `holding_years` inclusive.

    The old regime taxes the gain over the indexed purchase price; the new
    regime taxes the raw gain over BASE_PRICE, so its value does not depend
    on the year. Inputs are not range-checked.
    """
    sell_price = BASE_PRICE * price_multiplier
    new_tax = _floor_at_zero((sell_price - BASE_PRICE) * NEW_TAX_RATE)
    growth = 1 + indexation_rate / 100

    series = []
    for year in range(int(holding_years) + 1):
        indexed_cost = BASE_PRICE * growth ** year
        capital_gain = _floor_at_zero(sell_price - indexed_cost)
        series.append(YearRecord(
            year=year,
            old_tax=capital_gain * OLD_TAX_RATE,
            new_tax=new_tax,
            indexed_cost=indexed_cost,
            sell_price=sell_price,
        ))

    logger.debug(
        "Computed %d years for multiplier=%s rate=%s%%", len(series), price_multiplier, indexation_rate
    )
    return series


def find_crossover(series: list[YearRecord]) -> Optional[YearRecord]:
    """First year where the new flat tax is strictly higher than the old one."""
    for record in series:
        if record.new_tax > record.old_tax:
            logger.debug("Crossover at year %d", record.year)
            return record
    return None


def summarize(series: list[YearRecord], crossover: Optional[YearRecord]) -> TaxSummary:
    """Facts for the crossover year, or the regime that wins over the whole horizon."""
    if crossover is not None:
        return TaxSummary(
            has_crossover=True,
            year=crossover.year,
            sell_price=crossover.sell_price,
            indexed_cost=crossover.indexed_cost,
            old_tax=crossover.old_tax,
            new_tax=crossover.new_tax,
            favored_regime=None,
            message=f"Crossover Point: {crossover.year} years",
        )

    if not series:
        raise ValueError("Cannot summarize an empty series")

    final = series[-1]
    if final.old_tax < final.new_tax:
        favored, message = "old", OLD_REGIME_MESSAGE
    else:
        favored, message = "new", NEW_REGIME_MESSAGE

    return TaxSummary(
        has_crossover=False,
        year=final.year,
        sell_price=final.sell_price,
        indexed_cost=final.indexed_cost,
        old_tax=final.old_tax,
        new_tax=final.new_tax,
        favored_regime=favored,
        message=message,
    )


def series_to_frame(series: list[YearRecord]) -> pd.DataFrame:
    """Tabular view of a series for charts, the data tab and CSV export."""
    return pd.DataFrame(
        [{
            "Year": r.year,
            "Old Tax": r.old_tax,
            "New Tax": r.new_tax,
            "Indexed Cost": r.indexed_cost,
            "Sell Price": r.sell_price,
        } for r in series],
        columns=["Year", "Old Tax", "New Tax", "Indexed Cost", "Sell Price"],
    )


def compute_crossover_sensitivity(
    price_multiplier: float, holding_years: int, rates: Optional[np.ndarray] = None
) -> tuple[np.ndarray, np.ndarray]:
    """Crossover year for each indexation rate; NaN where the new regime never costs more."""
    if rates is None:
        rates = np.linspace(0, 20, 201)
    rates = np.asarray(rates, dtype=float)

    crossover_years = np.full(rates.shape, np.nan)
    for i, rate in enumerate(rates):
        crossover = find_crossover(compute_series(price_multiplier, float(rate), holding_years))
        if crossover is not None:
            crossover_years[i] = crossover.year

    return rates, crossover_years
