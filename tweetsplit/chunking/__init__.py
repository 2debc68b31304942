"""Chunking module for splitting responses into tweet threads."""

from .strategies import (
    ChunkingStrategy,
    TweetChunker,
    TweetThread,
    OverflowReport,
    ChunkOverflowError,
    split_paragraphs,
    merge_sentence_fragments,
    create_chunker,
    CHUNKING_PRESETS,
)
from .validators import ChunkValidator, validate_chunks

__all__ = [
    "ChunkingStrategy",
    "TweetChunker",
    "TweetThread",
    "OverflowReport",
    "ChunkOverflowError",
    "split_paragraphs",
    "merge_sentence_fragments",
    "create_chunker",
    "CHUNKING_PRESETS",
    "ChunkValidator",
    "validate_chunks",
]
