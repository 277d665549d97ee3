"""
Tier scoring for county market fundamentals.

Scores are out of 100: population 15, median income 15, YoY growth 20,
days on market 20 (lower is better), transaction volume 15 and
employment rate 15. Tier cut-offs are 85/70/50/30.
"""

from dataclasses import dataclass

TIER_THRESHOLDS = ((85.0, 1), (70.0, 2), (50.0, 3), (30.0, 4))

TIER_GUIDANCE = {
    1: ("Prime Investor", "PURSUE", "Exceptional liquidity and growth fundamentals."),
    2: ("Strong/Selective", "PURSUE", "Solid market; focus on specific neighborhood due diligence."),
    3: ("Opportunistic", "PURSUE", "Stable regional hub; steady cash flow potential."),
    4: ("Speculative", "CAUTION", "Limited liquidity; higher exit risk."),
    5: ("Capital Trap", "AVOID", "Weak fundamentals; significant risk of illiquidity."),
}


@dataclass(frozen=True)
class MarketInputs:
    population: int
    median_income: int
    growth_yoy: float
    days_on_market: int
    transaction_volume: int
    employment_rate: float


@dataclass(frozen=True)
class TierAssessment:
    score: float
    tier: int
    name: str
    action: str
    recommendation: str


def _capped(ratio: float) -> float:
    return max(0.0, min(ratio, 1.0))


def _days_on_market_points(days: int) -> float:
    if days < 30:
        return 20.0
    if days > 90:
        return 0.0
    return (90.0 - days) / 60.0 * 20.0


def score_county(inputs: MarketInputs) -> TierAssessment:
    """Score a county's fundamentals and map the score to a tier."""
    score = 0.0
    score += _capped(inputs.population / 500_000) * 15.0
    score += _capped(inputs.median_income / 80_000) * 15.0
    score += _capped(inputs.growth_yoy / 5.0) * 20.0
    score += _days_on_market_points(inputs.days_on_market)
    score += _capped(inputs.transaction_volume / 10_000) * 15.0
    score += _capped((inputs.employment_rate - 90.0) / 6.0) * 15.0

    tier = next((t for threshold, t in TIER_THRESHOLDS if score >= threshold), 5)
    name, action, recommendation = TIER_GUIDANCE[tier]
    return TierAssessment(score=score, tier=tier, name=name, action=action, recommendation=recommendation)
