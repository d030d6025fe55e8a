"""
Maturity tiers — Ordered score bands mapped to named maturity levels.
"""

from __future__ import annotations

from .models import MaturityTier

# Highest band first. Upper bounds carry a .99 suffix so bands never share a cut line.
MATURITY_TIERS: tuple[MaturityTier, ...] = (
    MaturityTier("Exceptional Cybersecurity Maturity", 91, 100),
    MaturityTier("Optimal Cybersecurity Maturity",     81, 90.99),
    MaturityTier("Manageable Cybersecurity Maturity",  71, 80.99),
    MaturityTier("Developing Cybersecurity Maturity",  61, 70.99),
    MaturityTier("Bare Minimum Cybersecurity Maturity", 51, 60.99),
    MaturityTier("Fail",                                0, 50.99),
)

FAIL_DESCRIPTION = (
    "The organization has scored below the cut-off in at least one domain/sub-domain"
)


def lookup_tier(
    total_score: float,
    tiers: tuple[MaturityTier, ...] = MATURITY_TIERS,
) -> MaturityTier:
    """
    Find the tier whose inclusive range holds total_score.

    Fractions that land between a .99 ceiling and the next cut line
    (e.g. 90.995) stay in the lower band. Anything outside the table
    falls back to the lowest tier.
    """
    for tier in tiers:
        if tier.contains(total_score):
            return tier

    # Second pass keeps the lookup monotonic: a higher score never lands in a lower tier
    ceiling = max(t.max_score for t in tiers)
    for tier in tiers:
        if tier.min_score <= total_score <= ceiling:
            return tier

    return tiers[-1]


def describe_tier(tier: MaturityTier) -> str:
    if tier.level == "Fail":
        return FAIL_DESCRIPTION
    return f"The organization has achieved {tier.level}"
