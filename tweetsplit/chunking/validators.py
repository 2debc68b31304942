"""Chunk validation utilities."""

import re
from typing import List

_NUMBERING = re.compile(r"^(\d+)/(\d+) ")


class ChunkValidator:
    """Validates tweet drafts and numbered threads."""

    @staticmethod
    def validate_drafts(drafts: List[str], max_length: int = 250) -> List[str]:
        """Validate drafts and return list of issues.

        Args:
            drafts: Un-numbered drafts to validate
            max_length: Hard length limit

        Returns:
            List of validation issue messages (empty if all valid)
        """
        issues = []

        for index, draft in enumerate(drafts):
            if not draft.strip():
                issues.append(f"Draft {index} is empty")
            elif draft != draft.strip():
                issues.append(f"Draft {index} has surrounding whitespace")

            if len(draft) > max_length:
                issues.append(
                    f"Draft {index} is {len(draft)} chars (max_length {max_length})"
                )

        return issues

    @staticmethod
    def validate_numbering(tweets: List[str]) -> List[str]:
        """Check that a thread is numbered ``i/N`` exactly when N > 1.

        Args:
            tweets: Numbered tweets

        Returns:
            List of issues
        """
        issues = []

        if len(tweets) == 1:
            if _NUMBERING.match(tweets[0]):
                issues.append("Single tweet must not carry a numbering prefix")
            return issues

        total = len(tweets)
        for index, tweet in enumerate(tweets):
            match = _NUMBERING.match(tweet)
            if not match:
                issues.append(f"Tweet {index} is missing its numbering prefix")
                continue
            position, count = int(match.group(1)), int(match.group(2))
            if position != index + 1 or count != total:
                issues.append(
                    f"Tweet {index} is numbered {position}/{count}, expected {index + 1}/{total}"
                )

        return issues


def validate_chunks(drafts: List[str], max_length: int = 250) -> bool:
    """Quick validation check.

    Args:
        drafts: Drafts to validate
        max_length: Hard length limit

    Returns:
        True if all drafts are valid, False otherwise
    """
    validator = ChunkValidator()
    issues = validator.validate_drafts(drafts, max_length)
    return len(issues) == 0
