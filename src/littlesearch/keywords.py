"""Turn raw whitespace-delimited tokens into index keywords."""

from collections.abc import Iterable

# Only these count as trailing punctuation; anything else left over rejects the
# token.
PUNCTUATION = ".,?:;!"


class KeywordNormalizer:
    def __init__(self, noise_words: Iterable[str] = ()) -> None:
        self._noise_words = frozenset(w.lower() for w in noise_words)

    @property
    def noise_words(self) -> frozenset[str]:
        return self._noise_words

    def normalize(self, token: str | None) -> str | None:
        """Return token as a keyword, or None if it is not one.

        normalize("Tree!!")  -> "tree"
        normalize("run,")    -> "run"
        normalize("it's")    -> None
        normalize("...")     -> None
        """
        if token is None:
            return None
        word = token.lower().rstrip(PUNCTUATION)
        if not word.isalpha():
            return None
        if word in self._noise_words:
            return None
        return word
