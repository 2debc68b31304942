#!/usr/bin/env python3
"""CLI interface for tweetsplit"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .chunking import CHUNKING_PRESETS, ChunkOverflowError
from .config import ChunkerConfig
from .formatting import strip_at_mentions
from .utils.env_loader import load_dotenv


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tweetsplit",
        description="Split a response into a numbered tweet thread",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tweetsplit answer.txt
  tweetsplit answer.txt -o thread.json --format json
  echo "Hello world." | tweetsplit - --segmenter regex
        """
    )

    parser.add_argument(
        "input",
        type=str,
        help="Input text file or '-' for stdin"
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        default="-",
        help="Output file (default: stdout)"
    )

    parser.add_argument(
        "--format",
        type=str,
        default="text",
        choices=["text", "json"],
        help="'text' prints tweets separated by blank lines, 'json' writes the full thread"
    )

    parser.add_argument(
        "--preset",
        type=str,
        default=None,
        choices=sorted(CHUNKING_PRESETS),
        help="Named length limits (default: from TWEETSPLIT_PRESET or 'twitter')"
    )

    parser.add_argument(
        "--max-length",
        type=int,
        default=None,
        help="Hard limit on tweet length before numbering"
    )

    parser.add_argument(
        "--soft-limit",
        type=int,
        default=None,
        help="Flush a tweet early once it grows past this length"
    )

    parser.add_argument(
        "--segmenter",
        type=str,
        default=None,
        choices=["spacy", "regex"],
        help="Sentence segmenter (default: from TWEETSPLIT_SEGMENTER or 'spacy')"
    )

    parser.add_argument(
        "--spacy-model",
        type=str,
        default=None,
        help="spaCy pipeline to load (default: en_core_web_sm, blank sentencizer if missing)"
    )

    parser.add_argument(
        "--strip-mentions",
        action="store_true",
        help="Rewrite @handles to plain handles before chunking"
    )

    parser.add_argument(
        "--no-numbering",
        action="store_true",
        help="Print drafts without i/N prefixes"
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail instead of emitting a tweet that exceeds the limit"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    # Load local .env if present
    load_dotenv(".env", override=False)

    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Read input
    if args.input == "-":
        text = sys.stdin.read()
    else:
        input_path = Path(args.input)
        if not input_path.exists():
            print(f"Error: Input file not found: {args.input}", file=sys.stderr)
            return 1
        text = input_path.read_text(encoding="utf-8")

    if args.strip_mentions:
        text = strip_at_mentions(text)

    config = ChunkerConfig.from_env().merged(
        preset=args.preset,
        max_length=args.max_length,
        soft_limit=args.soft_limit,
        segmenter=args.segmenter,
        spacy_model=args.spacy_model,
        strict=args.strict,
    )

    try:
        chunker = config.build_chunker()
        thread = chunker.chunk_thread(text)
    except ChunkOverflowError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Rerun without --strict to emit the over-length tweet anyway.", file=sys.stderr)
        return 1
    except (ValueError, ImportError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.format == "json":
        output = json.dumps(thread.to_dict(), indent=2, ensure_ascii=False)
    else:
        tweets = thread.drafts if args.no_numbering else thread.tweets
        output = "\n\n".join(tweets)

    # Write output
    if args.output == "-":
        print(output)
    else:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(output + "\n", encoding="utf-8")
        print(f"{len(thread)} tweets written to: {output_path}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
