"""In-memory keyword index: keyword -> occurrences in descending frequency."""

from collections.abc import Mapping

import polars as pl

from littlesearch.data_models.occurrence import Occurrence
from littlesearch.keywords import KeywordNormalizer

_SCHEMA = {
    "keyword": pl.String,
    "doc_id": pl.String,
    "frequency": pl.Int64,
    "rank": pl.Int64,
}

_STATS_SCHEMA = {
    "keyword": pl.String,
    "n_docs": pl.Int64,
    "total_frequency": pl.Int64,
    "top_doc": pl.String,
}


class IndexFrozenError(RuntimeError):
    pass


def insert_last_occurrence(occs: list[Occurrence]) -> list[int] | None:
    """Move occs[-1] into place, given occs[:-1] is sorted by descending frequency.

    The slot is found by binary search over occs[:-1]. On an equal frequency the
    search stops and the occurrence goes right after the probed element, so
    among ties it lands next to whichever one was probed first.

    Returns the probed midpoints in order, or None if occs has one element.
    """
    if not occs:
        raise ValueError("Cannot insert into an empty occurrence list")
    if len(occs) == 1:
        return None

    frequency = occs[-1].frequency
    mids: list[int] = []
    lo, hi = 0, len(occs) - 2
    while lo <= hi:
        mid = (lo + hi) // 2
        mids.append(mid)
        probed = occs[mid].frequency
        if probed < frequency:
            hi = mid - 1
        elif probed > frequency:
            lo = mid + 1
        else:
            occs.insert(mid + 1, occs.pop())
            return mids

    occs.insert(lo, occs.pop())
    return mids


class OccurrenceIndex:
    """Master index built by merging per-document frequency tables.

    Written only while building; call freeze() before serving queries.
    """

    def __init__(self, normalizer: KeywordNormalizer | None = None) -> None:
        self.normalizer = normalizer if normalizer is not None else KeywordNormalizer()
        self._entries: dict[str, list[Occurrence]] = {}
        self._doc_ids: set[str] = set()
        self._frozen = False

    def merge(self, kws: Mapping[str, Occurrence]) -> None:
        """Merge one document's keyword -> Occurrence table into the index.

        Raises IndexFrozenError once frozen, and ValueError if any document in
        kws was already merged.
        """
        if self._frozen:
            raise IndexFrozenError("Index is frozen; build a new one to add documents")
        doc_ids = {occ.doc_id for occ in kws.values()}
        already = doc_ids & self._doc_ids
        if already:
            raise ValueError(f"Documents already merged: {sorted(already)}")

        for keyword, occ in kws.items():
            occs = self._entries.get(keyword)
            if occs is None:
                self._entries[keyword] = [occ]
            else:
                occs.append(occ)
                insert_last_occurrence(occs)
        self._doc_ids |= doc_ids

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def get(self, keyword: str | None) -> tuple[Occurrence, ...] | None:
        if keyword is None:
            return None
        occs = self._entries.get(keyword)
        return tuple(occs) if occs is not None else None

    def keywords(self) -> list[str]:
        return sorted(self._entries)

    def doc_ids(self) -> list[str]:
        """Documents that contributed at least one keyword."""
        return sorted(self._doc_ids)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def to_polars(self) -> pl.DataFrame:
        rows = [
            (keyword, occ.doc_id, occ.frequency, rank)
            for keyword, occs in self._entries.items()
            for rank, occ in enumerate(occs)
        ]
        if not rows:
            return pl.DataFrame(schema=_SCHEMA)
        return pl.DataFrame(rows, schema=_SCHEMA, orient="row")

    def keyword_stats(self) -> pl.DataFrame:
        """One row per keyword: document count, summed frequency, top document."""
        df = self.to_polars()
        if df.is_empty():
            return pl.DataFrame(schema=_STATS_SCHEMA)
        return (
            df.group_by("keyword")
            .agg(
                pl.len().cast(pl.Int64).alias("n_docs"),
                pl.col("frequency").sum().alias("total_frequency"),
                pl.col("doc_id").sort_by("rank").first().alias("top_doc"),
            )
            .sort(["total_frequency", "keyword"], descending=[True, False])
            .select(list(_STATS_SCHEMA))
        )
