"""
Tests for sentence segmenters.

spaCy tests never download a model: an unknown model name exercises the
blank-pipeline sentencizer fallback.
"""
import pytest

from tweetsplit.chunking import TweetChunker
from tweetsplit.segmentation import RegexSegmenter, SentenceSegmenter, create_segmenter

MISSING_MODEL = "tweetsplit_missing_model_for_tests"


class TestRegexSegmenter:

    def test_splits_on_terminal_punctuation(self):
        segmenter = RegexSegmenter()
        assert segmenter.segment("Hello there. How are you? Fine!") == [
            "Hello there.",
            "How are you?",
            "Fine!",
        ]

    def test_no_split_without_following_whitespace(self):
        assert RegexSegmenter().segment("Version 2.5 is out.") == ["Version 2.5 is out."]

    def test_empty(self):
        assert RegexSegmenter().segment("") == []
        assert RegexSegmenter().segment("   ") == []

    def test_is_callable(self):
        segmenter = RegexSegmenter()
        assert isinstance(segmenter, SentenceSegmenter)
        assert segmenter("A. B.") == ["A.", "B."]


class TestCreateSegmenter:

    def test_regex(self):
        assert isinstance(create_segmenter("regex"), RegexSegmenter)

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown segmenter"):
            create_segmenter("wink")


class TestSpacySegmenter:

    @pytest.fixture
    def spacy_segmenter(self):
        pytest.importorskip("spacy")
        from tweetsplit.segmentation import SpacySegmenter

        return SpacySegmenter(model=MISSING_MODEL)

    def test_missing_model_falls_back_to_sentencizer(self, spacy_segmenter):
        assert spacy_segmenter.model == "blank:en"
        assert spacy_segmenter.nlp.has_pipe("sentencizer")

    def test_fallback_logs_warning(self, caplog):
        pytest.importorskip("spacy")
        from tweetsplit.segmentation import SpacySegmenter

        with caplog.at_level("WARNING", logger="tweetsplit.segmentation"):
            SpacySegmenter(model=MISSING_MODEL)

        assert "falling back to rule-based sentencizer" in caplog.text

    def test_missing_model_without_fallback_raises(self):
        pytest.importorskip("spacy")
        from tweetsplit.segmentation import SpacySegmenter

        with pytest.raises(OSError):
            SpacySegmenter(model=MISSING_MODEL, fallback_to_sentencizer=False)

    def test_segments_sentences(self, spacy_segmenter):
        sentences = spacy_segmenter.segment("This is the first sentence. Here is another one!")
        assert sentences == ["This is the first sentence.", "Here is another one!"]

    def test_empty_paragraph(self, spacy_segmenter):
        assert spacy_segmenter.segment("  ") == []

    def test_drives_chunker(self, spacy_segmenter):
        chunker = TweetChunker(segmenter=spacy_segmenter)
        assert chunker.chunk("Hello world.") == ["Hello world."]
