"""Score arithmetic for the audit categories."""

from seo_audit.constants import MAX_SCORE, SCORE_BANDS


def calculate_score(issues: list[str], penalty: int) -> int:
    """Deduct a fixed penalty per issue from a perfect score.

    Args:
        issues: Issues triggered in one category
        penalty: Points deducted per issue

    Returns:
        Score between 0 and 100
    """
    return max(0, MAX_SCORE - len(issues) * penalty)


def score_band(score: int) -> tuple[str, str]:
    """Return the (band, color) pair a score falls into."""
    for minimum, band, color in SCORE_BANDS:
        if score >= minimum:
            return band, color
    return SCORE_BANDS[-1][1], SCORE_BANDS[-1][2]
