from datetime import date, datetime, timedelta, timezone

import pytest

from daily_wordle.config import WORD_LIST
from daily_wordle.services.word_selector import (
    date_to_seed, make_word_validator, select_word, to_utc_date
)
from daily_wordle.utils.errors import InvalidInput

from conftest import WORDS


def test_date_to_seed_is_utc_midnight_timestamp():
    assert date_to_seed(date(1970, 1, 1)) == 0
    assert date_to_seed(date(1970, 1, 2)) == 86400
    assert date_to_seed(date(2024, 1, 1)) == 1704067200


def test_same_date_selects_same_word():
    day = date(2024, 1, 1)
    assert select_word(WORDS, day) == select_word(WORDS, day)
    assert select_word(["apple", "table"], day) == select_word(["apple", "table"], day)


def test_selected_word_comes_from_list():
    for offset in range(30):
        day = date(2024, 1, 1) + timedelta(days=offset)
        assert select_word(["apple", "table"], day) in ("apple", "table")


def test_time_of_day_does_not_matter():
    morning = datetime(2024, 3, 5, 0, 1, tzinfo=timezone.utc)
    night = datetime(2024, 3, 5, 23, 59, tzinfo=timezone.utc)
    assert select_word(WORDS, morning) == select_word(WORDS, night) == select_word(WORDS, date(2024, 3, 5))


def test_aware_datetime_normalized_to_utc():
    # 23:30 on March 4th at UTC-5 is already March 5th in UTC
    eastern = timezone(timedelta(hours=-5))
    late = datetime(2024, 3, 4, 23, 30, tzinfo=eastern)
    assert to_utc_date(late) == date(2024, 3, 5)
    assert select_word(WORDS, late) == select_word(WORDS, date(2024, 3, 5))


def test_single_word_list():
    assert select_word(["apple"], date(2030, 6, 1)) == "apple"


def test_empty_word_list_raises():
    with pytest.raises(InvalidInput):
        select_word([], date(2024, 1, 1))


def test_non_date_raises():
    with pytest.raises(InvalidInput):
        to_utc_date("2024-01-01")


def test_word_validator_membership():
    is_valid = make_word_validator(["apple", "table"])
    assert is_valid("apple")
    assert is_valid(" TABLE ")
    assert not is_valid("hello")
    assert not is_valid("apples")


@pytest.mark.parametrize("day,expected", [
    (date(2024, 1, 1), "music"),
    (date(2024, 1, 2), "hello"),
])
def test_word_of_the_day_is_stable_across_runs(day, expected):
    assert select_word(WORD_LIST, day) == expected
