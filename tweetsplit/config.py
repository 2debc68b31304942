"""
Chunker configuration from environment variables.

Reads the TWEETSPLIT_* variables once and hands the values to the chunker
factory. CLI flags override whatever is found here.
"""
import os
import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

ENV_PREFIX = "TWEETSPLIT_"
_TRUTHY = {"1", "true", "yes", "on"}


def _env_int(env: Mapping[str, str], name: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring {ENV_PREFIX}{name}={raw!r}: not an integer")
        return default


@dataclass
class ChunkerConfig:
    """Chunker settings.

    ``max_length`` and ``soft_limit`` left as None fall back to the preset.
    """

    preset: str = "twitter"
    max_length: Optional[int] = None
    soft_limit: Optional[int] = None
    segmenter: str = "spacy"
    spacy_model: str = "en_core_web_sm"
    strict: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "ChunkerConfig":
        """Build config from TWEETSPLIT_* environment variables.

        Args:
            env: Mapping to read from (default: os.environ)

        Returns:
            ChunkerConfig with defaults for anything unset or malformed
        """
        if env is None:
            env = os.environ

        config = cls(
            preset=env.get(ENV_PREFIX + "PRESET", cls.preset),
            max_length=_env_int(env, "MAX_LENGTH", None),
            soft_limit=_env_int(env, "SOFT_LIMIT", None),
            segmenter=env.get(ENV_PREFIX + "SEGMENTER", cls.segmenter),
            spacy_model=env.get(ENV_PREFIX + "SPACY_MODEL", cls.spacy_model),
            strict=env.get(ENV_PREFIX + "STRICT", "").strip().lower() in _TRUTHY,
        )
        logger.debug(f"Chunker config: {config}")
        return config

    def merged(self, **overrides: Any) -> "ChunkerConfig":
        """Return a copy with every non-None override applied."""
        values = asdict(self)
        values.update({k: v for k, v in overrides.items() if v is not None})
        return ChunkerConfig(**values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def build_chunker(self, segmenter=None):
        """Create the configured TweetChunker.

        Args:
            segmenter: Pre-built segmenter; built from ``self.segmenter`` if None
        """
        from .chunking import create_chunker
        from .segmentation import create_segmenter

        if segmenter is None:
            if self.segmenter == "spacy":
                segmenter = create_segmenter("spacy", model=self.spacy_model)
            else:
                segmenter = create_segmenter(self.segmenter)

        return create_chunker(
            preset=self.preset,
            segmenter=segmenter,
            max_length=self.max_length,
            soft_limit=self.soft_limit,
            strict=self.strict,
        )
