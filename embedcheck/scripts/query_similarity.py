#!/usr/bin/env python3
"""
Score sentence similarity with the Hugging Face Inference API.

Usage:
    python -m embedcheck.scripts.query_similarity
    python -m embedcheck.scripts.query_similarity --query "What is ML?" --compare "ML is AI" --compare "Cats"
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional, Tuple

from embedcheck.config import Settings, DEFAULT_ENV_FILE
from embedcheck.services.huggingface_client import HuggingFaceClient
from embedcheck.services.similarity_service import query_similarity

logger = logging.getLogger(__name__)

# (title, [reference, *candidates])
EXAMPLE_SETS: List[Tuple[str, List[str]]] = [
    ("Test Set 1: Original Examples", [
        "Hello world",
        "Machine learning is fascinating",
        "PGVector is a great extension for PostgreSQL"
    ]),
    ("Test Set 2: Machine Learning Related Sentences", [
        "What is machine learning?",
        "Machine learning is AI technology",
        "Deep learning is a subset of machine learning",
        "Natural language processing uses machine learning"
    ]),
]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare sentences against a reference sentence")
    parser.add_argument("--env-file", default=DEFAULT_ENV_FILE,
                        help="Credential file with HUGGINGFACE_API_KEY (falls back to the environment)")
    parser.add_argument("--query", help="Reference sentence")
    parser.add_argument("--compare", action="append", default=[],
                        help="Sentence to compare against the query, repeatable")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    if args.compare and not args.query:
        parser.error("--compare requires --query")
    return args


async def run(client: HuggingFaceClient, query_sets: List[Tuple[str, List[str]]]) -> None:
    for index, (title, texts) in enumerate(query_sets):
        print(f"\n{title}" if index else title)
        await query_similarity(client, texts[0], texts[1:])


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    settings = Settings.from_environment(args.env_file)
    if not settings.huggingface_api_key:
        logger.warning("HUGGINGFACE_API_KEY is empty, requests will be rejected")

    if args.query:
        query_sets = [("Custom Query", [args.query, *args.compare])]
    else:
        query_sets = EXAMPLE_SETS

    asyncio.run(run(HuggingFaceClient(settings), query_sets))
    return 0


if __name__ == "__main__":
    sys.exit(main())
