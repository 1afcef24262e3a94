# Area: Game
"""Elimination quotas per round."""

FIRST_ROUND_QUOTA = 6

# (non-held containers still in play greater than, quota), checked in order
QUOTA_BANDS = (
    (10, 5),
    (6, 4),
    (3, 2),
)
FINAL_QUOTA = 1

# held + one other
FINAL_PAIR = 2


def quota_for(available_count: int) -> int:
    """Quota for the round after a rejected offer."""
    for threshold, quota in QUOTA_BANDS:
        if available_count > threshold:
            return quota
    return FINAL_QUOTA
