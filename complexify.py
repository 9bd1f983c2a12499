#!/usr/bin/env python3
"""
complexify.py — Rewrite a text file with more sophisticated vocabulary.

Usage:
    python complexify.py essay.txt                   # Print rewritten text
    cat essay.txt | python complexify.py -           # Read from stdin
    python complexify.py essay.txt --density 0.05    # Cap substitutions at 5% of tokens
    python complexify.py essay.txt --vocab-csv my.csv  # Add custom vocabulary first
    python complexify.py essay.txt --json            # Full result as JSON (for CI)
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from complexifier.config import settings
from complexifier.engine import ProcessingTimeoutError, SubstitutionEngine
from complexifier.logging import setup_logging
from complexifier.providers.factory import get_embedding_provider, get_mask_predictor
from complexifier.vocabulary import parse_vocabulary_csv


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


async def _run(args: argparse.Namespace, text: str) -> int:
    engine = SubstitutionEngine(
        get_embedding_provider(args.provider),
        get_mask_predictor(settings.MASK_PROVIDER),
    )

    if args.vocab_csv:
        entries = parse_vocabulary_csv(Path(args.vocab_csv).read_text(encoding="utf-8"))
        count = await engine.add_custom_vocabulary(entries)
        print(f"Loaded {count} custom entries from {args.vocab_csv}", file=sys.stderr)

    await engine.initialize()
    if not engine.is_ready:
        print("Error: models are not ready (check provider configuration)", file=sys.stderr)
        return 1

    result = await engine.process_text(text, max_density=args.density, timeout=args.timeout)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(result.modified_text)
        print(
            f"\n{result.substitutions_made} substitution(s) "
            f"from {result.substitutions_attempted} candidate word(s)",
            file=sys.stderr,
        )
        for sub in result.substitutions:
            print(f"  {sub.original} → {sub.replacement}", file=sys.stderr)
    return 0


def main():
    parser = argparse.ArgumentParser(description="Complexifier — context-safe vocabulary upgrades")
    parser.add_argument(
        "input",
        help="Path to a text file, or - for stdin",
    )
    parser.add_argument(
        "--density",
        type=float,
        default=None,
        help=f"Max fraction of tokens to replace (default: {settings.MAX_DENSITY})",
    )
    parser.add_argument(
        "--vocab-csv",
        default=None,
        help="CSV file with Word and Synonym columns to add as custom vocabulary",
    )
    parser.add_argument(
        "--provider",
        default=settings.EMBEDDING_PROVIDER,
        choices=["huggingface", "gemini"],
        help=f"Embedding provider (default: {settings.EMBEDDING_PROVIDER})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help=f"Processing timeout in seconds (default: {settings.PROCESS_TIMEOUT_SECONDS})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output the full document result as JSON",
    )
    args = parser.parse_args()

    if args.input != "-" and not Path(args.input).exists():
        print(f"Error: Input file not found: {args.input}")
        sys.exit(1)
    if args.vocab_csv and not Path(args.vocab_csv).exists():
        print(f"Error: Vocabulary file not found: {args.vocab_csv}")
        sys.exit(1)

    setup_logging(stream=sys.stderr)
    text = _read_input(args.input)

    try:
        code = asyncio.run(_run(args, text))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    except ProcessingTimeoutError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(3)
    sys.exit(code)


if __name__ == "__main__":
    main()
