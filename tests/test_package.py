import pytest

import tweetsplit


def test_lazy_exports_resolve():
    from tweetsplit.chunking import TweetChunker, create_chunker
    from tweetsplit.config import ChunkerConfig

    assert tweetsplit.TweetChunker is TweetChunker
    assert tweetsplit.create_chunker is create_chunker
    assert tweetsplit.ChunkerConfig is ChunkerConfig


def test_unknown_attribute():
    with pytest.raises(AttributeError):
        tweetsplit.does_not_exist


def test_top_level_chunking_flow(regex_segmenter):
    chunker = tweetsplit.create_chunker(segmenter=regex_segmenter)
    assert chunker.chunk("Hello world.") == ["Hello world."]
