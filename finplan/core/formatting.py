"""Text helpers for amounts quoted inside generated advice."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest whole rupee, .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def group_indian(amount: float) -> str:
    """Format ``amount`` as a whole number with Indian digit grouping.

    The last three digits form one group and every two digits before them
    form another, so 12345678 becomes ``1,23,45,678``.
    """
    whole = round_half_up(amount)
    sign = "-" if whole < 0 else ""
    digits = str(abs(whole))
    if len(digits) <= 3:
        return f"{sign}{digits}"

    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return f"{sign}{','.join(groups)},{tail}"
