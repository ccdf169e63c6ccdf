"""Read corpus sources from disk: documents, the document listing, noise words."""

from pathlib import Path

from littlesearch.data_models.occurrence import Occurrence
from littlesearch.keywords import KeywordNormalizer


class SourceNotFoundError(FileNotFoundError):
    """A document, document listing or noise-word file could not be opened."""


def _read_text(path: str | Path | None, what: str) -> str:
    """Return the file's text; undecodable bytes become U+FFFD."""
    if path is None:
        raise SourceNotFoundError(f"{what} not found: no path given")
    p = Path(path)
    if not p.is_file():
        raise SourceNotFoundError(f"{what} not found: {p}")
    try:
        with p.open(encoding="utf-8", errors="replace") as f:
            return f.read()
    except OSError as e:
        raise SourceNotFoundError(f"{what} could not be opened: {p} ({e})") from e


def extract_frequencies(
    doc_file: str | Path | None,
    normalizer: KeywordNormalizer,
    doc_id: str | None = None,
) -> dict[str, Occurrence]:
    """Count keyword frequencies in one document.

    Tokens the normalizer rejects are skipped, including any holding bytes that
    are not valid UTF-8. The returned Occurrences carry doc_id, or str(doc_file)
    when doc_id is not given.
    """
    text = _read_text(doc_file, "Document")
    if doc_id is None:
        doc_id = str(doc_file)

    counts: dict[str, int] = {}
    for token in text.split():
        keyword = normalizer.normalize(token)
        if keyword is not None:
            counts[keyword] = counts.get(keyword, 0) + 1

    return {
        keyword: Occurrence(doc_id=doc_id, frequency=n)
        for keyword, n in counts.items()
    }


def load_noise_words(path: str | Path | None) -> frozenset[str]:
    """Return every whitespace-delimited token in the file, lower-cased."""
    text = _read_text(path, "Noise-word list")
    return frozenset(w.lower() for w in text.split())


def read_doc_list(path: str | Path | None) -> list[str]:
    """Return document identifiers, one per non-blank line, first-seen order."""
    seen: set[str] = set()
    doc_ids = []
    for line in _read_text(path, "Document listing").splitlines():
        doc_id = line.strip()
        if doc_id and doc_id not in seen:
            seen.add(doc_id)
            doc_ids.append(doc_id)
    return doc_ids
