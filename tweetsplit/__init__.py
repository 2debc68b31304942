"""tweetsplit - split generated responses into numbered tweet threads"""
__version__ = "0.1.0"

# Lightweight pieces with no optional dependencies
from .formatting import number_chunks, strip_numbering, strip_at_mentions
from .segmentation import SentenceSegmenter, RegexSegmenter

# The chunking module is cheap, but spaCy is only imported when a
# SpacySegmenter is actually built.

__all__ = [
    # Formatting
    "number_chunks",
    "strip_numbering",
    "strip_at_mentions",
    # Segmentation
    "SentenceSegmenter",
    "RegexSegmenter",
    "SpacySegmenter",
    "create_segmenter",
    # Chunking
    "TweetChunker",
    "TweetThread",
    "ChunkOverflowError",
    "create_chunker",
    "CHUNKING_PRESETS",
    "ChunkValidator",
    "validate_chunks",
    # Config
    "ChunkerConfig",
]


def __getattr__(name: str):
    """Lazy loading for the chunking and config modules.

    Note: Imported objects are cached in globals() for subsequent access.
    """
    lazy_imports = {
        "SpacySegmenter": ".segmentation",
        "create_segmenter": ".segmentation",
        "TweetChunker": ".chunking",
        "TweetThread": ".chunking",
        "ChunkOverflowError": ".chunking",
        "create_chunker": ".chunking",
        "CHUNKING_PRESETS": ".chunking",
        "ChunkValidator": ".chunking",
        "validate_chunks": ".chunking",
        "ChunkerConfig": ".config",
    }

    if name in lazy_imports:
        import importlib
        module = importlib.import_module(lazy_imports[name], __name__)
        attr = getattr(module, name)
        globals()[name] = attr
        return attr

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
