#!/usr/bin/env python3
"""
Rank a small sample corpus (or lines from a file) against a query.

Examples:
  python scripts/search_demo.py "Love Java"
  python scripts/search_demo.py "programmer" --language en --top-k 3
  python scripts/search_demo.py "bonjour" --corpus docs.txt --language fr
"""
from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from bm25_ranker import BM25, BM25Error, Language

SAMPLE_CORPUS = [
    "I love programming",
    "Java is my favorite programming language",
    "I enjoy writing code in Java",
    "Java is another popular programming language",
    "I find programming fascinating",
    "I love Java",
    "I prefer Java over Python",
]


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Rank documents against a query with BM25.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("query", help="Free-text query")
    parser.add_argument("--corpus", type=Path, help="File with one document per line (default: built-in sample)")
    parser.add_argument(
        "--language",
        choices=[lang.code for lang in Language],
        help="Use this language's stopwords and stemmer (default: English stopwords, no stemming)",
    )
    parser.add_argument("--k1", type=float, default=1.5, help="TF saturation (default: 1.5)")
    parser.add_argument("--b", type=float, default=0.75, help="Length normalization (default: 0.75)")
    parser.add_argument("--top-k", type=int, default=None, help="Only print the best K documents")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.corpus is not None:
        corpus = [line.strip() for line in args.corpus.read_text(encoding="utf-8").splitlines() if line.strip()]
    else:
        corpus = SAMPLE_CORPUS

    start = time.perf_counter()
    try:
        if args.language:
            bm25 = BM25.for_language(corpus, args.language, k1=args.k1, b=args.b)
        else:
            bm25 = BM25(corpus, k1=args.k1, b=args.b)
        results = bm25.search(args.query, top_k=args.top_k)
    except BM25Error as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    elapsed_ms = (time.perf_counter() - start) * 1000

    print(f"Search results for: {args.query}")
    for hit in results:
        print(f"  doc {hit.index:>3}  score={hit.score:.4f}  [{corpus[hit.index]}]")
    print(f"Time taken: {elapsed_ms:.1f}ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())
