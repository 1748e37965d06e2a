import re

from ..document import DocumentQuery

_VOWEL_GROUP = re.compile(r"[aeiouy]+")
_WHITESPACE = re.compile(r"\s+")
# Everything except word characters, whitespace and sentence terminators.
_NON_SENTENCE_PUNCTUATION = re.compile(r"[^\w\s.!?]")
_SENTENCE_TERMINATORS = re.compile(r"[.!?]+")
_PARAGRAPH_BREAK = re.compile(r"\n\n+")


def extract_visible_text(document: DocumentQuery) -> str:
    return document.text()


def clean_text(text: str) -> str:
    text = _WHITESPACE.sub(" ", text)
    text = _NON_SENTENCE_PUNCTUATION.sub("", text)
    return text.strip()


def split_sentences(clean: str) -> list:
    return [s for s in _SENTENCE_TERMINATORS.split(clean) if s.strip()]


def split_words(clean: str) -> list:
    return clean.split()


def count_paragraphs(text: str) -> int:
    return len([p for p in _PARAGRAPH_BREAK.split(text) if p.strip()])


def count_syllables(word: str) -> int:
    word = word.lower().strip()
    if len(word) <= 3:
        return 1
    count = len(_VOWEL_GROUP.findall(word))
    # silent trailing e
    if word.endswith("e"):
        count -= 1
    if word.endswith("es") or word.endswith("ed"):
        count -= 1
    return max(1, count)
