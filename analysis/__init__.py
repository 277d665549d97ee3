"""
Analysis module for Auction Intel.

This module scores county market fundamentals and maps the score onto
the five investment tiers.
"""

from .tier_scoring import (
    TIER_GUIDANCE,
    TIER_THRESHOLDS,
    MarketInputs,
    TierAssessment,
    score_county
)

__all__ = [
    # Tier scoring
    'TIER_GUIDANCE',
    'TIER_THRESHOLDS',
    'MarketInputs',
    'TierAssessment',
    'score_county',
]

# Version info
__version__ = "1.0.0"
