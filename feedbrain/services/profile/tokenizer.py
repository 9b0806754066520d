from collections.abc import Iterator

from feedbrain.core.constants import MIN_STEM_LENGTH, MIN_TOKEN_LENGTH, STEM_SUFFIXES, STOP_WORDS


class Tokenizer:
    """
    Turns titles and channel names into normalized topic tokens.

    Lower-cases, trims punctuation from word edges, drops short words and stop
    words, then applies a light suffix-stripping stem.
    """

    def __init__(
        self,
        stop_words: frozenset[str] = STOP_WORDS,
        suffixes: tuple[str, ...] = STEM_SUFFIXES,
    ):
        self.stop_words = stop_words
        self.suffixes = suffixes

    @staticmethod
    def strip_edges(word: str) -> str:
        start, end = 0, len(word)
        while start < end and not word[start].isalnum():
            start += 1
        while end > start and not word[end - 1].isalnum():
            end -= 1
        return word[start:end]

    def stem(self, token: str) -> str:
        for suf in self.suffixes:
            if not token.endswith(suf):
                continue
            if suf == "s" and token.endswith("ss"):
                return token
            if len(token) - len(suf) >= MIN_STEM_LENGTH:
                return token[: -len(suf)]
        return token

    def surface_words(self, text: str) -> Iterator[str]:
        """Filtered words before stemming."""
        if not text:
            return
        for part in text.lower().split():
            word = self.strip_edges(part)
            if len(word) < MIN_TOKEN_LENGTH or word in self.stop_words:
                continue
            yield word

    def tokenize(self, text: str, stem: bool = True) -> Iterator[str]:
        for word in self.surface_words(text):
            yield self.stem(word) if stem else word


tokenizer = Tokenizer()
