import io

from rf_link_budget.cookies import format_set_cookie, get_cookie
from rf_link_budget.form import parse_form, read_form


def test_parse_form_pairs() -> None:
    form = parse_form("tx_power=20&tx_gain=10&rx_loss=")
    assert form == {"tx_power": "20", "tx_gain": "10", "rx_loss": ""}


def test_parse_form_last_duplicate_wins() -> None:
    assert parse_form("tx_power=1&tx_power=2&tx_power=3")["tx_power"] == "3"


def test_parse_form_decodes_urlencoding() -> None:
    form = parse_form("tx_power=1e%2B1&misc_loss=%2D2&label=a+b\r\n")
    assert form == {"tx_power": "1e+1", "misc_loss": "-2", "label": "a b"}


def test_parse_form_skips_fragments_without_values() -> None:
    assert parse_form("&&tx_gain&rx_gain=5&") == {"rx_gain": "5"}


def test_read_form_consumes_single_line() -> None:
    stream = io.StringIO("tx_power=20\ntx_power=30\n")
    assert read_form(stream) == {"tx_power": "20"}
    assert stream.readline() == "tx_power=30\n"


def test_get_cookie_matches_exact_name() -> None:
    header = "xsession_id=wrong; session_id=abc-123; theme=dark"
    assert get_cookie(header, "session_id") == "abc-123"
    assert get_cookie(header, "missing") == ""
    assert get_cookie(None, "session_id") == ""
    assert get_cookie("", "session_id") == ""


def test_format_set_cookie_attributes() -> None:
    assert format_set_cookie("session_id", "abc") == "session_id=abc; HttpOnly; Secure"
    assert format_set_cookie("session_id", "abc", secure=False, http_only=False) == "session_id=abc"
