from debt_docket import patterns
from debt_docket.normalizer import clean_fragments


def test_match_date_full_and_abbreviated_months():
    assert patterns.match_date("Wednesday, January 3, 2024") == "January 3, 2024"
    assert patterns.match_date("Sep 12, 2023 calendar") == "Sep 12, 2023"
    assert patterns.match_date("01/03/2024") is None


def test_match_time_needs_two_digit_hour_and_meridiem():
    assert patterns.match_time("01:00 PM   1   MOTION") == "01:00 PM"
    assert patterns.match_time("11:45 AM") == "11:45 AM"
    assert patterns.match_time("1:00 PM") is None
    assert patterns.match_time("13:00") is None


def test_match_court():
    assert patterns.match_court("Courtroom S34") == "S34"
    assert patterns.match_court("Courtroom S35") is None


def test_separator_and_versus():
    assert patterns.is_separator("------------")
    assert not patterns.is_separator("CASE NO. 23-09")
    assert patterns.is_versus("  VS.  ")
    assert not patterns.is_versus("VS")


def test_match_digits_returns_first_run():
    assert patterns.match_digits("Debt Collection 230901234 (2)") == "230901234"
    assert patterns.match_digits("no number") is None


def test_clean_fragments_drops_short_lines_and_commas():
    assert clean_fragments(["", " ", "ab", "DOE, JANE"]) == ["ab", "DOE| JANE"]
