"""Answer "kw1 or kw2" queries against a built index.

Usage:
    python -m littlesearch.search \\
        --docs docs.txt --noise-words noisewords.txt \\
        [--query deep world] [--query sun flower]

With no --query, reads "kw1 kw2" pairs from stdin, one pair per line.
"""

import argparse
from pathlib import Path
import sys

from pydantic import BaseModel, ConfigDict

from littlesearch.build_index import build_index
from littlesearch.data_models.occurrence import Occurrence
from littlesearch.data_models.occurrence_index import OccurrenceIndex

MAX_RESULTS = 5


class QueryResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    kw1: str | None
    kw2: str | None
    keyword1: str | None  # kw1 after normalization, None if rejected
    keyword2: str | None
    documents: list[str] | None  # None = no match

    def __str__(self) -> str:
        label = f"{self.kw1} or {self.kw2}"
        if self.documents is None:
            return f"{label}: no result"
        return f"{label}: [{', '.join(self.documents)}]"


def top5search(
    index: OccurrenceIndex, kw1: str | None, kw2: str | None
) -> list[str] | None:
    """Return up to 5 documents containing kw1 or kw2, highest frequency first.

    Ties go to the earlier candidate, with kw1's occurrences ahead of kw2's.
    Each document appears once. Returns None when nothing matches.
    """
    keyword1 = index.normalizer.normalize(kw1)
    keyword2 = index.normalizer.normalize(kw2)
    occs1 = index.get(keyword1)
    occs2 = index.get(keyword2)
    if index.is_empty or (occs1 is None and occs2 is None):
        return None

    candidates: list[Occurrence] = [*(occs1 or ()), *(occs2 or ())]
    result: list[str] = []
    while candidates and len(result) < MAX_RESULTS:
        # max() keeps the first of equal frequencies
        best = max(range(len(candidates)), key=lambda i: candidates[i].frequency)
        doc_id = candidates.pop(best).doc_id
        if doc_id not in result:
            result.append(doc_id)
    return result


def run_query(index: OccurrenceIndex, kw1: str | None, kw2: str | None) -> QueryResult:
    return QueryResult(
        kw1=kw1,
        kw2=kw2,
        keyword1=index.normalizer.normalize(kw1),
        keyword2=index.normalizer.normalize(kw2),
        documents=top5search(index, kw1, kw2),
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Top-5 two-keyword search")
    parser.add_argument("--docs", required=True, help="File listing document paths")
    parser.add_argument(
        "--noise-words", required=True, help="File of noise words to skip"
    )
    parser.add_argument(
        "--base-dir", default=None, help="Resolve relative document paths here"
    )
    parser.add_argument(
        "--query",
        nargs=2,
        action="append",
        metavar=("KW1", "KW2"),
        default=None,
        help="Keyword pair to search for (repeatable)",
    )
    args = parser.parse_args()

    base_dir = Path(args.base_dir) if args.base_dir else None
    index = build_index(args.docs, args.noise_words, base_dir=base_dir)
    print(f"Indexed {len(index.doc_ids())} docs, {len(index)} keywords")

    if args.query:
        for kw1, kw2 in args.query:
            print(run_query(index, kw1, kw2))
        return

    for line in sys.stdin:
        terms = line.split()
        if len(terms) != 2:
            print(f"  skipping {line.strip()!r}: expected two keywords")
            continue
        print(run_query(index, terms[0], terms[1]))


if __name__ == "__main__":
    main()
