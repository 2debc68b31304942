"""
Pytest configuration and shared fixtures for tweetsplit tests.

Every fixture here avoids loading a spaCy model; tests that need spaCy
request it explicitly with pytest.importorskip.
"""
import pytest
from typing import Dict, List

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def regex_segmenter():
    """Fixture providing the dependency-free punctuation segmenter."""
    from tweetsplit.segmentation import RegexSegmenter

    return RegexSegmenter()


@pytest.fixture
def scripted_segmenter():
    """Fixture returning a factory for segmenters with canned output.

    Paragraphs missing from the script come back as a single sentence.
    """
    def factory(script: Dict[str, List[str]]):
        calls: List[str] = []

        def segment(paragraph: str) -> List[str]:
            calls.append(paragraph)
            return list(script.get(paragraph, [paragraph]))

        segment.calls = calls
        return segment

    return factory


@pytest.fixture
def chunker(regex_segmenter):
    """Fixture providing a default-limit chunker on the regex segmenter."""
    from tweetsplit.chunking import TweetChunker

    return TweetChunker(segmenter=regex_segmenter)


@pytest.fixture
def long_response():
    """Fixture providing a multi-paragraph response that needs several tweets."""
    first = " ".join(
        f"Point {i} explains how the thread keeps every sentence in its original order."
        for i in range(1, 7)
    )
    second = (
        "This closing paragraph contains one very long sentence that keeps going "
        "with plenty of ordinary words so that it can never fit inside a single "
        "tweet and therefore has to be split on spaces by the chunker while the "
        "remaining words continue in the following tweet of the same thread "
        "without losing or reordering any of them along the way."
    )
    return f"{first}\n\n{second}\nThanks for reading."
