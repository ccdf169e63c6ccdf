from pathlib import Path

import pytest

from littlesearch.documents import (
    SourceNotFoundError,
    extract_frequencies,
    load_noise_words,
    read_doc_list,
)
from littlesearch.keywords import KeywordNormalizer


@pytest.fixture
def normalizer() -> KeywordNormalizer:
    return KeywordNormalizer(["the", "a"])


def test_extract_frequencies(tmp_path: Path, normalizer: KeywordNormalizer) -> None:
    doc = tmp_path / "doc1.txt"
    doc.write_text("The cat sat. The cat ran!\nA dog, a DOG? it's 42 cats\n")

    kws = extract_frequencies(doc, normalizer)

    assert {k: occ.frequency for k, occ in kws.items()} == {
        "cat": 2,
        "sat": 1,
        "ran": 1,
        "dog": 2,
        "cats": 1,
    }
    assert all(occ.doc_id == str(doc) for occ in kws.values())


def test_extract_frequencies_doc_id_override(
    tmp_path: Path, normalizer: KeywordNormalizer
) -> None:
    doc = tmp_path / "doc1.txt"
    doc.write_text("hello hello")

    kws = extract_frequencies(doc, normalizer, doc_id="doc1.txt")

    assert kws["hello"].doc_id == "doc1.txt"
    assert kws["hello"].frequency == 2


def test_extract_frequencies_empty_doc(
    tmp_path: Path, normalizer: KeywordNormalizer
) -> None:
    doc = tmp_path / "empty.txt"
    doc.write_text("the a ... 123\n")

    assert extract_frequencies(doc, normalizer) == {}


def test_extract_frequencies_missing_doc(
    tmp_path: Path, normalizer: KeywordNormalizer
) -> None:
    with pytest.raises(SourceNotFoundError):
        extract_frequencies(tmp_path / "nope.txt", normalizer)


def test_extract_frequencies_none(normalizer: KeywordNormalizer) -> None:
    with pytest.raises(SourceNotFoundError):
        extract_frequencies(None, normalizer)


def test_source_not_found_is_file_not_found(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_noise_words(tmp_path / "noise.txt")


def test_load_noise_words(tmp_path: Path) -> None:
    path = tmp_path / "noise.txt"
    path.write_text("a the\nAn\n\n  of\n")

    assert load_noise_words(path) == frozenset({"a", "the", "an", "of"})


def test_read_doc_list_dedupes_and_skips_blank(tmp_path: Path) -> None:
    path = tmp_path / "docs.txt"
    path.write_text("d1.txt\n\n  d2.txt  \nd1.txt\nd3.txt")

    assert read_doc_list(path) == ["d1.txt", "d2.txt", "d3.txt"]


def test_read_doc_list_missing() -> None:
    with pytest.raises(SourceNotFoundError):
        read_doc_list(None)


def test_extract_frequencies_non_utf8_bytes(
    tmp_path: Path, normalizer: KeywordNormalizer
) -> None:
    doc = tmp_path / "latin1.txt"
    doc.write_bytes(b"caf\xe9 cat cat\n")

    kws = extract_frequencies(doc, normalizer)

    # only the undecodable token is dropped
    assert {k: occ.frequency for k, occ in kws.items()} == {"cat": 2}


@pytest.mark.parametrize(
    "read",
    [
        lambda p, n: extract_frequencies(p, n),
        lambda p, n: load_noise_words(p),
        lambda p, n: read_doc_list(p),
    ],
)
def test_unreadable_source(
    tmp_path: Path,
    normalizer: KeywordNormalizer,
    monkeypatch: pytest.MonkeyPatch,
    read,
) -> None:
    path = tmp_path / "locked.txt"
    path.write_text("cat\n")

    def deny(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "open", deny)

    with pytest.raises(SourceNotFoundError) as exc_info:
        read(path, normalizer)
    assert isinstance(exc_info.value.__cause__, PermissionError)
