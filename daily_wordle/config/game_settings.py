"""
Game Configuration Constants Module

Word length, attempt limit and the embedded word list. A word list file
can replace the embedded list; see load_word_list().
"""

from typing import Final, Iterable, List

from ..utils.errors import InvalidInput

WORD_LENGTH: Final[int] = 5

MAX_TRIES: Final[int] = 6
"""
Maximum number of guess attempts allowed per daily game.
"""

WORD_LIST: Final[List[str]] = [
    "about",
    "penne",
    "apple",
    "table",
    "hello",
    "world",
    "globe",
    "water",
    "earth",
    "space",
    "music",
]


def normalize_word(word: str) -> str:
    return word.strip().lower()


def _check_word(word: str, where: str) -> None:
    if len(word) != WORD_LENGTH:
        raise InvalidInput(f"{where} '{word}' is not {WORD_LENGTH} characters long")
    if not word.isalpha():
        raise InvalidInput(f"{where} '{word}' contains non-alphabetic characters")


def parse_word_list(lines: Iterable[str]) -> List[str]:
    """
    Build a word list from lines of text, one word per line.

    Blank lines and lines starting with '#' are skipped, words are
    lower-cased and duplicates are dropped keeping the first occurrence.

    Raises:
        InvalidInput: If a word is malformed or no words remain
    """
    words: List[str] = []
    seen = set()
    for line_no, line in enumerate(lines, start=1):
        word = normalize_word(line)
        if not word or word.startswith('#'):
            continue
        _check_word(word, f"Word on line {line_no}")
        if word not in seen:
            seen.add(word)
            words.append(word)

    if not words:
        raise InvalidInput("Word list cannot be empty")
    return words


def load_word_list(path: str) -> List[str]:
    """
    Load a word list file.

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidInput: If the file holds malformed words or none at all
    """
    with open(path, 'r', encoding='utf-8') as f:
        return parse_word_list(f)


def validate_word_list_integrity(words: List[str] = WORD_LIST) -> bool:
    """
    Check that every word is five lowercase letters and that there are
    no duplicates.

    Raises:
        InvalidInput: Describing the first problem found
    """
    if not words:
        raise InvalidInput("Word list cannot be empty")

    for index, word in enumerate(words):
        _check_word(word, f"Word at index {index}")
        if not word.islower():
            raise InvalidInput(f"Word at index {index} '{word}' is not in lowercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise InvalidInput(f"Duplicate words found in word list: {duplicates}")

    return True
