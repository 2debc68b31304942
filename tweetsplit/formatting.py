"""Presentation helpers applied around chunking."""

import re
from typing import List

_NUMBERING_PREFIX = re.compile(r"^\d+/\d+ ")
_AT_MENTION = re.compile(r"\B@([A-Za-z0-9_]+)\b")


def number_chunks(drafts: List[str]) -> List[str]:
    """Trim drafts, drop empty ones and prefix each with its position.

    A single draft is returned without a prefix. With N > 1 drafts, draft i
    (0-based) becomes ``"{i+1}/{N} {draft}"``.

    Args:
        drafts: Chunk drafts in presentation order

    Returns:
        Final tweets ready to be posted in order
    """
    cleaned = [d.strip() for d in drafts]
    cleaned = [d for d in cleaned if d]

    if len(cleaned) <= 1:
        return cleaned

    total = len(cleaned)
    return [f"{index + 1}/{total} {draft}" for index, draft in enumerate(cleaned)]


def strip_numbering(tweet: str) -> str:
    """Remove a leading ``i/N `` prefix if present."""
    return _NUMBERING_PREFIX.sub("", tweet, count=1)


def strip_at_mentions(text: str) -> str:
    """Turn ``@handle`` into ``handle`` so posted text does not mention accounts.

    Email addresses are left alone because the ``@`` there follows a word
    character.
    """
    return _AT_MENTION.sub(r"\1", text)
