"""Speaker identifier formatting.

Identifiers are a fixed prefix followed by a base-10 sequence number,
e.g. ``id90000``.
"""

import re

DEFAULT_PREFIX = "id"


def format_speaker_id(number: int, prefix: str = DEFAULT_PREFIX) -> str:
    """Format a sequence number as a speaker identifier.

    Args:
        number: Non-negative sequence number.
        prefix: Identifier prefix.

    Returns:
        The identifier string.

    Raises:
        ValueError: If number is negative.
    """
    if number < 0:
        raise ValueError(f"Sequence number must be non-negative, got {number}")
    return f"{prefix}{number}"


def parse_speaker_id(speaker_id: str, prefix: str = DEFAULT_PREFIX) -> int:
    """Extract the sequence number from a speaker identifier.

    Args:
        speaker_id: Identifier such as ``id90001``.
        prefix: Identifier prefix.

    Returns:
        The sequence number.

    Raises:
        ValueError: If the identifier is not ``<prefix><digits>``.
    """
    match = re.fullmatch(rf"{re.escape(prefix)}(\d+)", speaker_id)
    if match is None:
        raise ValueError(f"Invalid speaker identifier: {speaker_id!r}")
    return int(match.group(1))
