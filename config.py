from __future__ import annotations

from dataclasses import dataclass

# =============================================================================
# TAX CONSTANTS
# =============================================================================
BASE_PRICE = 10_000_000  # 1 Crore
OLD_TAX_RATE = 0.20      # on indexed gain
NEW_TAX_RATE = 0.125     # flat, on raw gain


# =============================================================================
# INPUT BOUNDS
# =============================================================================
@dataclass(frozen=True)
class SliderBounds:
    min_value: float
    max_value: float
    step: float
    default: float

    def contains(self, value: float) -> bool:
        return self.min_value <= value <= self.max_value


PRICE_MULTIPLIER = SliderBounds(min_value=0.5, max_value=50.0, step=0.1, default=3.0)
INDEXATION_RATE = SliderBounds(min_value=0.0, max_value=20.0, step=0.1, default=5.0)
HOLDING_YEARS = SliderBounds(min_value=1, max_value=100, step=1, default=70)


@dataclass(frozen=True)
class Parameters:
    """One set of calculator inputs as collected from the sidebar."""
    price_multiplier: float = PRICE_MULTIPLIER.default
    indexation_rate: float = INDEXATION_RATE.default
    holding_years: int = HOLDING_YEARS.default

    def errors(self) -> list[str]:
        """Return a message per input outside its slider range."""
        problems = []
        if not PRICE_MULTIPLIER.contains(self.price_multiplier):
            problems.append(
                f"Price multiplier must be between {PRICE_MULTIPLIER.min_value}x "
                f"and {PRICE_MULTIPLIER.max_value}x (got {self.price_multiplier})."
            )
        if not INDEXATION_RATE.contains(self.indexation_rate):
            problems.append(
                f"Indexation rate must be between {INDEXATION_RATE.min_value}% "
                f"and {INDEXATION_RATE.max_value}% (got {self.indexation_rate})."
            )
        if not HOLDING_YEARS.contains(self.holding_years) or int(self.holding_years) != self.holding_years:
            problems.append(
                f"Holding period must be a whole number of years between "
                f"{HOLDING_YEARS.min_value} and {HOLDING_YEARS.max_value} (got {self.holding_years})."
            )
        return problems
