"""Chunking strategies for splitting text into a numbered tweet thread."""

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from ..formatting import number_chunks
from ..segmentation import SentenceSegmenter, create_segmenter

logger = logging.getLogger(__name__)

SegmentFn = Callable[[str], List[str]]

# Sentence starts that are really the tail of a dotted name such as "Next.js".
_FRAGMENT_START = re.compile(r"(?:js|ts|jsx|tsx)\b")


class ChunkOverflowError(ValueError):
    """Raised in strict mode when a forced split still exceeds the limit."""

    def __init__(self, draft: str, max_length: int):
        self.draft = draft
        self.max_length = max_length
        super().__init__(
            f"Draft length {len(draft)} exceeds max_length {max_length} after forced split"
        )


@dataclass
class OverflowReport:
    """A draft that was emitted even though it exceeds the length limit."""

    index: int
    length: int
    max_length: int
    draft: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "length": self.length,
            "max_length": self.max_length,
            "draft": self.draft,
        }


@dataclass
class TweetThread:
    """Result of chunking one response."""

    tweets: List[str]
    drafts: List[str]
    overflows: List[OverflowReport] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tweets)

    def to_dict(self) -> Dict[str, Any]:
        """Convert thread to dictionary."""
        return {
            "count": len(self.tweets),
            "tweets": list(self.tweets),
            "drafts": list(self.drafts),
            "overflows": [o.to_dict() for o in self.overflows],
        }


class ChunkingStrategy(ABC):
    """Abstract chunking strategy."""

    @abstractmethod
    def chunk(self, text: str) -> List[str]:
        """Chunk text into ordered, presentation-ready segments.

        Args:
            text: Input text to chunk

        Returns:
            List of chunk strings in presentation order
        """
        pass


def split_paragraphs(text: str) -> List[str]:
    """Split text on newlines into trimmed, non-empty paragraphs."""
    paragraphs = [p.strip() for p in text.split("\n")]
    return [p for p in paragraphs if p]


def merge_sentence_fragments(sentences: List[str]) -> List[str]:
    """Re-join sentences the segmenter broke inside names like ``Next.js``.

    A sentence ending in ``.`` absorbs the following sentence when that one
    starts with ``js``, ``ts``, ``jsx`` or ``tsx`` as a whole word. One
    left-to-right pass; after a merge the scan moves on to the next index, so
    the merged sentence is not tested again.

    Args:
        sentences: Sentences of one paragraph, in order

    Returns:
        New list with fragments merged
    """
    merged = list(sentences)
    i = 0
    while i < len(merged) - 1:
        s0, s1 = merged[i], merged[i + 1]
        if s0.endswith(".") and _FRAGMENT_START.match(s1):
            merged[i] = f"{s0}{s1}"
            del merged[i + 1]
        i += 1
    return merged


class TweetChunker(ChunkingStrategy):
    """Sentence-aware chunker that packs text into bounded-length tweets.

    Sentences are accumulated into a draft separated by blank lines. A draft
    longer than ``soft_limit`` is flushed before anything else is appended. A
    sentence that cannot fit is split on spaces; the part that fits closes the
    current draft with an ellipsis and the rest is placed next.
    """

    def __init__(
        self,
        segmenter: Union[SentenceSegmenter, SegmentFn],
        max_length: int = 250,
        soft_limit: int = 200,
        separator: str = "\n\n",
        ellipsis: str = "...",
        strict: bool = False,
    ):
        """Initialize tweet chunker.

        Args:
            segmenter: Callable returning the sentences of a paragraph
            max_length: Hard limit on draft length in characters (default: 250)
            soft_limit: Drafts longer than this are flushed before appending (default: 200)
            separator: Joiner between sentences inside a draft
            ellipsis: Marker appended to drafts cut by a forced split
            strict: Raise ChunkOverflowError instead of logging an over-length draft
        """
        if max_length < 1:
            raise ValueError("max_length must be positive")
        if not 0 <= soft_limit <= max_length:
            raise ValueError("soft_limit must be between 0 and max_length")
        if len(ellipsis) >= max_length:
            raise ValueError("ellipsis must be shorter than max_length")

        self.segmenter = segmenter
        self.max_length = max_length
        self.soft_limit = soft_limit
        self.separator = separator
        self.ellipsis = ellipsis
        self.strict = strict

    def sentences(self, text: str) -> List[str]:
        """Segment every paragraph of text and apply the fragment merge rule."""
        result: List[str] = []
        for paragraph in split_paragraphs(text):
            result.extend(self._paragraph_sentences(paragraph))
        return result

    def _paragraph_sentences(self, paragraph: str) -> List[str]:
        return merge_sentence_fragments(list(self.segmenter(paragraph)))

    def chunk(self, text: str) -> List[str]:
        """Chunk text into numbered tweets."""
        return self.chunk_thread(text).tweets

    def chunk_drafts(self, text: str) -> List[str]:
        """Chunk text into un-numbered drafts."""
        drafts, _ = self._build_drafts(text)
        return drafts

    def chunk_thread(self, text: str) -> TweetThread:
        """Chunk text and keep drafts and overflow diagnostics alongside the tweets.

        Args:
            text: Response text to split

        Returns:
            TweetThread with numbered tweets, raw drafts and overflow reports
        """
        drafts, overflows = self._build_drafts(text)
        tweets = number_chunks(drafts)
        logger.debug(f"Chunked {len(text)} chars into {len(tweets)} tweets")
        return TweetThread(tweets=tweets, drafts=drafts, overflows=overflows)

    def _build_drafts(self, text: str) -> Tuple[List[str], List[OverflowReport]]:
        drafts: List[str] = []
        overflows: List[OverflowReport] = []
        current = ""
        sentences: List[str] = []
        paragraphs = split_paragraphs(text)
        for paragraph in paragraphs:
            sentences.extend(self._paragraph_sentences(paragraph))

        for sentence in sentences:
            pending = sentence
            while True:
                if len(current) > self.soft_limit:
                    drafts.append(current)
                    current = ""

                candidate = f"{current}{self.separator}{pending}" if current else pending
                if len(candidate) <= self.max_length:
                    current = candidate.strip()
                    break

                draft, pending = self._force_split(current, pending)
                if len(draft) > self.max_length:
                    self._report_overflow(draft, len(drafts), overflows)
                drafts.append(draft)
                current = ""

                if not pending.strip():
                    break

        if current:
            drafts.append(current.strip())

        drafts = [d.strip() for d in drafts]
        drafts = [d for d in drafts if d]
        logger.debug(
            f"Built {len(drafts)} drafts from {len(paragraphs)} paragraphs "
            f"({len(sentences)} sentences)"
        )
        return drafts, overflows

    def _force_split(self, current: str, pending: str) -> Tuple[str, str]:
        """Split pending text on spaces so the head closes the current draft.

        Tokens are appended while the closed draft (trimmed, plus ellipsis)
        stays within max_length. Once a token does not fit, it and every token
        after it form the remainder.

        Returns:
            Tuple of (closed draft, remainder text)
        """
        prefix = f"{current}{self.separator}" if current else ""
        # Leading whitespace would give an empty first token that always fits.
        tokens = pending.strip().split(" ")
        taken = 0

        for token in tokens:
            candidate = f"{prefix}{token} "
            if len(candidate.strip()) + len(self.ellipsis) > self.max_length:
                break
            prefix = candidate
            taken += 1

        remainder = tokens[taken:]
        if taken == 0 and not current:
            # A single token longer than the limit: hard-truncate it.
            cut = self.max_length - len(self.ellipsis)
            prefix = tokens[0][:cut]
            remainder = [tokens[0][cut:]] + tokens[1:]

        return prefix.strip() + self.ellipsis, " ".join(remainder)

    def _report_overflow(
        self, draft: str, index: int, overflows: List[OverflowReport]
    ) -> None:
        if self.strict:
            raise ChunkOverflowError(draft, self.max_length)
        logger.error(
            f"Unexpected draft length {len(draft)} > {self.max_length} after forced split: {draft!r}"
        )
        overflows.append(
            OverflowReport(
                index=index,
                length=len(draft),
                max_length=self.max_length,
                draft=draft,
            )
        )


# Named length limits; numbering prefixes need headroom below the platform cap.
CHUNKING_PRESETS: Dict[str, Dict[str, int]] = {
    "twitter": {"max_length": 250, "soft_limit": 200},
    "twitter_premium_preview": {"max_length": 270, "soft_limit": 220},
    "mastodon": {"max_length": 480, "soft_limit": 400},
}


def create_chunker(
    preset: str = "twitter",
    segmenter: Optional[Union[SentenceSegmenter, SegmentFn]] = None,
    max_length: Optional[int] = None,
    soft_limit: Optional[int] = None,
    **kwargs
) -> TweetChunker:
    """Factory function to create a tweet chunker.

    Args:
        preset: Name in CHUNKING_PRESETS supplying default limits
        segmenter: Sentence segmenter (default: SpacySegmenter)
        max_length: Override the preset hard limit
        soft_limit: Override the preset soft limit
        **kwargs: Additional TweetChunker parameters (separator, ellipsis, strict)

    Returns:
        TweetChunker instance
    """
    if preset not in CHUNKING_PRESETS:
        raise ValueError(f"Unknown chunking preset: {preset}")

    limits = dict(CHUNKING_PRESETS[preset])
    if max_length is not None:
        limits["max_length"] = max_length
    if soft_limit is not None:
        limits["soft_limit"] = soft_limit
    # A lowered hard limit drags an unset soft limit down with it.
    if soft_limit is None and limits["soft_limit"] > limits["max_length"]:
        limits["soft_limit"] = limits["max_length"]

    if segmenter is None:
        segmenter = create_segmenter("spacy")

    return TweetChunker(segmenter=segmenter, **limits, **kwargs)
