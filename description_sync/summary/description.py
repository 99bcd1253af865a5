"""Place a workout summary block into an activity description."""

from __future__ import annotations

from description_sync.config import DEFAULT_SUMMARY_SEPARATOR


def has_summary(description: str | None, separator: str = DEFAULT_SUMMARY_SEPARATOR) -> bool:
    return bool(description) and separator in description


def merge_summary(description: str | None, summary: str, separator: str = DEFAULT_SUMMARY_SEPARATOR) -> str:
    """Append the summary block under the separator line.

    Example:
        `merge_summary("Felt good", "2X:\\n- 400m @ Z4 (170)")` returns
        `"Felt good\\n---Workout Summary---\\n2X:\\n- 400m @ Z4 (170)"`.
    """

    block = f"{separator}\n{summary}"
    if not description:
        return block
    return f"{description}\n{block}"
