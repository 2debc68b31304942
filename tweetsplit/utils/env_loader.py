"""Environment loader utilities.

A small `.env` reader so limits and segmenter choice can be set per deployment
without touching code. Values are never logged.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict


def parse_dotenv(text: str) -> Dict[str, str]:
    """Parse KEY=VALUE lines.

    Blank lines and `#` comments are skipped, an optional `export ` prefix is
    accepted and matching surrounding quotes are removed.
    """
    values: Dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        if line.startswith("export "):
            line = line[len("export "):].lstrip()

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]
        values[key] = value
    return values


def load_dotenv(path: str | os.PathLike[str] = ".env", *, override: bool = False) -> bool:
    """Load environment variables from a .env file.

    Args:
        path: Path to .env file (default: ".env" in current working directory).
        override: If True, overwrite existing os.environ keys.

    Returns:
        True if a file was found and parsed; False if file does not exist.
    """
    p = Path(path)
    if not p.is_file():
        return False

    for key, value in parse_dotenv(p.read_text(encoding="utf-8", errors="ignore")).items():
        if override or key not in os.environ:
            os.environ[key] = value
    return True
