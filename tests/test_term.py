import io

from overture.term import (
    TERM_BOLD,
    TERM_FG_RED,
    TERM_FG_WHITE,
    TERM_RESET,
    TERM_UNDERLINE,
    is_term,
    term1,
    term2,
    term3,
)


def test_term1_reset_sequence():
    assert term1(TERM_RESET) == "\x1b[0m"


def test_term2_red_bold():
    assert term2(TERM_FG_RED, TERM_BOLD) == "\x1b[31;1m"


def test_term3_joins_with_semicolons():
    assert term3(TERM_FG_WHITE, TERM_BOLD, TERM_UNDERLINE) == "\x1b[37;1;4m"


def test_term2_matches_term1_of_joined_codes():
    assert term2(TERM_FG_RED, TERM_BOLD) == term1(TERM_FG_RED + ";" + TERM_BOLD)


def test_term3_matches_term2_with_joined_last_codes():
    assert term3(TERM_FG_RED, TERM_BOLD, TERM_UNDERLINE) == term2(
        TERM_FG_RED, TERM_BOLD + ";" + TERM_UNDERLINE
    )


def test_string_stream_is_not_a_terminal():
    assert is_term(io.StringIO()) is False


def test_stream_reporting_tty_is_terminal():
    class FakeTty(io.StringIO):
        def isatty(self):
            return True

    assert is_term(FakeTty()) is True


def test_object_without_isatty_is_not_a_terminal():
    assert is_term(object()) is False


def test_closed_stream_is_not_a_terminal():
    stream = io.StringIO()
    stream.close()
    assert is_term(stream) is False