"""Build the keyword index over a corpus of text documents.

Usage:
    python -m littlesearch.build_index \\
        --docs docs.txt --noise-words noisewords.txt [--top 20]
"""

import argparse
from pathlib import Path

import polars as pl

from littlesearch.data_models.occurrence_index import OccurrenceIndex
from littlesearch.documents import extract_frequencies, load_noise_words, read_doc_list
from littlesearch.keywords import KeywordNormalizer


def build_index(
    docs_file: str | Path | None,
    noise_words_file: str | Path | None,
    base_dir: Path | None = None,
) -> OccurrenceIndex:
    """Index every document listed in docs_file and return the frozen index.

    Relative document paths resolve against base_dir when given, otherwise the
    working directory. Each document's id is its path as listed.
    """
    normalizer = KeywordNormalizer(load_noise_words(noise_words_file))
    index = OccurrenceIndex(normalizer)
    for doc_id in read_doc_list(docs_file):
        path = Path(doc_id)
        if base_dir is not None and not path.is_absolute():
            path = base_dir / path
        index.merge(extract_frequencies(path, normalizer, doc_id=doc_id))
    index.freeze()
    return index


def main() -> None:
    parser = argparse.ArgumentParser(description="Build the keyword index")
    parser.add_argument("--docs", required=True, help="File listing document paths")
    parser.add_argument(
        "--noise-words", required=True, help="File of noise words to skip"
    )
    parser.add_argument(
        "--base-dir", default=None, help="Resolve relative document paths here"
    )
    parser.add_argument(
        "--top", type=int, default=20, help="Number of keywords to show"
    )
    args = parser.parse_args()

    base_dir = Path(args.base_dir) if args.base_dir else None
    print(f"Indexing documents listed in {args.docs}...")
    index = build_index(args.docs, args.noise_words, base_dir=base_dir)
    print(
        f"Indexed {len(index.doc_ids())} docs, {len(index)} keywords "
        f"({len(index.normalizer.noise_words)} noise words)"
    )

    with pl.Config(tbl_rows=args.top):
        print(index.keyword_stats().head(args.top))


if __name__ == "__main__":
    main()
