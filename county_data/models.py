"""
Record types for county and state auction data.

County rows historically travel as positional 8-tuples in the order
``[name, pop, income, zhvi, growth, dom, tier, notes]``. ``CountyRecord``
keeps that order as its field order so ``from_row``/``as_row`` can convert
between the two shapes.
"""

from dataclasses import astuple, dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from core.exceptions import ValidationError

VALID_TIERS = (1, 2, 3, 4, 5)


@dataclass(frozen=True)
class CountyRecord:
    """One county row. Field order matches the legacy positional tuple."""
    name: str
    population: int
    median_income: int
    home_value_index: int
    yoy_growth_pct: float
    days_on_market: int
    tier: int
    notes: str = ''

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> 'CountyRecord':
        """
        Build a record from a positional row.

        The eighth field (notes) is optional; anything else missing is an error.
        """
        if len(row) not in (7, 8):
            raise ValidationError(
                f"County row must have 7 or 8 fields, got {len(row)}",
                field='row', value=list(row)
            )
        try:
            return cls(
                name=str(row[0]),
                population=int(row[1]),
                median_income=int(row[2]),
                home_value_index=int(row[3]),
                yoy_growth_pct=float(row[4]),
                days_on_market=int(row[5]),
                tier=int(row[6]),
                notes=str(row[7]) if len(row) == 8 and row[7] is not None else '',
            )
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid county row: {e}", field='row', value=list(row))

    def as_row(self) -> Tuple[Any, ...]:
        return astuple(self)

    @property
    def has_known_tier(self) -> bool:
        return self.tier in VALID_TIERS


@dataclass(frozen=True)
class TierInfo:
    """Display metadata for an investment tier."""
    label: str
    name: str
    color: str
    bg: str
    action: str


TIERS: Dict[int, TierInfo] = {
    1: TierInfo("T1", "Prime", "#059669", "#D1FAE5", "PURSUE"),
    2: TierInfo("T2", "Strong", "#2563EB", "#DBEAFE", "PURSUE"),
    3: TierInfo("T3", "Opportunity", "#D97706", "#FEF3C7", "PURSUE"),
    4: TierInfo("T4", "Speculative", "#EA580C", "#FFEDD5", "CAUTION"),
    5: TierInfo("T5", "Avoid", "#DC2626", "#FEE2E2", "AVOID"),
}

DEFAULT_TIER_COLOR = "#64748B"


def get_tier_info(tier: Any) -> Optional[TierInfo]:
    """Return tier metadata, or None for a tier outside 1..5."""
    return TIERS.get(tier)


@dataclass(frozen=True)
class StateAuctionInfo:
    """Tax sale rules for one state."""
    abbr: str
    sale_type: str  # 'Lien' or 'Deed'
    interest_rate: str
    redemption_period: str
    notes: str = ''

    @property
    def is_lien_state(self) -> bool:
        return self.sale_type.lower() == 'lien'

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> 'StateAuctionInfo':
        """Build from a ``/api/state-info`` element."""
        try:
            return cls(
                abbr=str(payload['abbr']).upper(),
                sale_type=str(payload['type']),
                interest_rate=str(payload.get('interest_rate', '')),
                redemption_period=str(payload.get('redemption_period', '')),
                notes=str(payload.get('notes') or ''),
            )
        except KeyError as e:
            raise ValidationError(f"State info is missing field {e}", field=str(e), value=payload)
