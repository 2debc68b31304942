"""Sentence segmentation backends.

The chunker never detects sentence boundaries itself. It is handed a
segmenter: any callable that maps a paragraph to its ordered sentences.
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import List

logger = logging.getLogger(__name__)


class SentenceSegmenter(ABC):
    """Abstract sentence segmenter interface."""

    @abstractmethod
    def segment(self, text: str) -> List[str]:
        """Split a paragraph into sentences.

        Args:
            text: A single trimmed paragraph

        Returns:
            Ordered list of sentence substrings covering the paragraph
        """
        pass

    def __call__(self, text: str) -> List[str]:
        return self.segment(text)


class SpacySegmenter(SentenceSegmenter):
    """spaCy-based sentence segmenter.

    The pipeline is loaded once per instance and only read afterwards, so a
    single segmenter can be shared between threads.
    """

    def __init__(
        self,
        model: str = "en_core_web_sm",
        fallback_to_sentencizer: bool = True,
        lang: str = "en",
    ):
        """Initialize spaCy segmenter.

        Args:
            model: spaCy pipeline package name (default: en_core_web_sm)
            fallback_to_sentencizer: Use the rule-based sentencizer on a blank
                pipeline if the model package is not installed
            lang: Language code for the blank fallback pipeline
        """
        try:
            import spacy
        except ImportError:
            raise ImportError(
                "spacy is required for SpacySegmenter. "
                "Install with: pip install spacy"
            )

        self.model = model
        try:
            self.nlp = spacy.load(model)
            logger.info(f"spaCy model '{model}' loaded for sentence segmentation")
        except OSError:
            if not fallback_to_sentencizer:
                raise
            logger.warning(
                f"spaCy model '{model}' not found, falling back to rule-based sentencizer. "
                f"Install with: python -m spacy download {model}"
            )
            self.model = f"blank:{lang}"
            self.nlp = spacy.blank(lang)

        # Parser-less pipelines need an explicit sentence boundary component.
        if not any(self.nlp.has_pipe(name) for name in ("parser", "senter", "sentencizer")):
            self.nlp.add_pipe("sentencizer")

    def segment(self, text: str) -> List[str]:
        if not text.strip():
            return []
        doc = self.nlp(text)
        return [sent.text.strip() for sent in doc.sents if sent.text.strip()]


class RegexSegmenter(SentenceSegmenter):
    """Punctuation-based segmenter.

    Splits after `.`, `!` or `?` followed by whitespace. No abbreviation
    handling.
    """

    _BOUNDARY = re.compile(r"(?<=[.!?])\s+")

    def segment(self, text: str) -> List[str]:
        return [s.strip() for s in self._BOUNDARY.split(text) if s.strip()]


def create_segmenter(name: str = "spacy", **kwargs) -> SentenceSegmenter:
    """Factory function to create a sentence segmenter.

    Args:
        name: Segmenter backend ("spacy" or "regex")
        **kwargs: Backend-specific parameters (e.g. model for spacy)

    Returns:
        SentenceSegmenter instance
    """
    if name == "spacy":
        return SpacySegmenter(**kwargs)
    elif name == "regex":
        return RegexSegmenter()
    else:
        raise ValueError(f"Unknown segmenter: {name}")
