"""
Game Configuration Constants Module

This module defines the game rules, loads the built-in word pool, and validates
the settings callers may change (attempt limit, word list, host cheating and
dictionary enforcement).
"""

import json
import os
from collections.abc import Iterable
from typing import Final, List, Optional

from ..errors import EmptyWordPool, InvalidConfig, InvalidWordList
from ..models.game import GameSettings

WORD_LENGTH: Final[int] = 5

MAX_ATTEMPTS: Final[int] = 6
"""
Default number of guess attempts allowed per game.
"""


def normalize_word(word) -> Optional[str]:
    """
    Normalizes a single word to uppercase without surrounding whitespace.

    Returns:
        The normalized word, or None if it is not exactly 5 letters
    """
    if not isinstance(word, str):
        return None
    normalized = word.strip().upper()
    if len(normalized) != WORD_LENGTH or not normalized.isalpha() or not normalized.isascii():
        return None
    return normalized


def normalize_word_list(words: Iterable[str]) -> List[str]:
    """
    Validates and normalizes a whole word list.

    The update is all-or-nothing: if any entry fails, nothing is accepted and
    every offending entry is reported. Duplicates are dropped, first
    occurrence wins.

    Raises:
        InvalidWordList: If any entry does not normalize to 5 letters
        EmptyWordPool: If the list holds no words at all
    """
    if isinstance(words, str) or not isinstance(words, Iterable):
        raise InvalidConfig("Word list must be a list of words")

    normalized_words = []
    invalid_words = []
    seen = set()
    for word in words:
        normalized = normalize_word(word)
        if normalized is None:
            invalid_words.append(str(word))
            continue
        if normalized not in seen:
            seen.add(normalized)
            normalized_words.append(normalized)

    if invalid_words:
        raise InvalidWordList(invalid_words)
    if not normalized_words:
        raise EmptyWordPool("Word list cannot be empty")
    return normalized_words


def _load_word_list() -> List[str]:
    """
    Load the built-in word pool from wordles.json.

    Raises:
        FileNotFoundError: If wordles.json file is not found
        ValueError: If the JSON is malformed or any word is invalid
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'wordles.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in wordles.json: {e}")

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    try:
        return normalize_word_list(word_list)
    except (InvalidWordList, EmptyWordPool) as e:
        raise ValueError(f"Built-in word list is invalid: {e.message}")


# Curated Word Database loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()


def _validate_max_attempts(max_attempts) -> int:
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
        raise InvalidConfig("max_attempts must be an integer")
    if max_attempts < 1:
        raise InvalidConfig("max_attempts must be at least 1")
    return max_attempts


def _validate_flag(name: str, value) -> bool:
    if not isinstance(value, bool):
        raise InvalidConfig(f"{name} must be true or false")
    return value


def default_settings(max_attempts: int = MAX_ATTEMPTS, enforce_dictionary: bool = False) -> GameSettings:
    """Settings used when a caller supplies no overrides."""
    return GameSettings(
        max_attempts=_validate_max_attempts(max_attempts),
        word_list=tuple(WORD_LIST),
        host_cheating=False,
        enforce_dictionary=enforce_dictionary
    )


def resolve_settings(base: Optional[GameSettings] = None,
                     max_attempts=None,
                     word_list=None,
                     host_cheating=None,
                     enforce_dictionary=None) -> GameSettings:
    """
    Applies caller overrides on top of base settings.

    Options left as None keep the base value. Validation happens before
    anything is returned, so a rejected update never leaks partial settings.

    Raises:
        InvalidConfig: If max_attempts is not an integer >= 1, or a flag is
            not a boolean
        InvalidWordList: If any word list entry is not 5 letters
        EmptyWordPool: If the supplied word list is empty (an InvalidConfig)
    """
    settings = base or default_settings()

    if max_attempts is not None:
        max_attempts = _validate_max_attempts(max_attempts)
    else:
        max_attempts = settings.max_attempts

    if word_list is not None:
        word_list = tuple(normalize_word_list(word_list))
    else:
        word_list = settings.word_list

    if host_cheating is not None:
        host_cheating = _validate_flag("host_cheating", host_cheating)
    else:
        host_cheating = settings.host_cheating

    if enforce_dictionary is not None:
        enforce_dictionary = _validate_flag("enforce_dictionary", enforce_dictionary)
    else:
        enforce_dictionary = settings.enforce_dictionary

    return GameSettings(
        max_attempts=max_attempts,
        word_list=word_list,
        host_cheating=host_cheating,
        enforce_dictionary=enforce_dictionary
    )
