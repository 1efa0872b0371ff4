import base64
import hashlib
import hmac
from urllib.parse import parse_qsl

import pytest

from bittrex_rest import utils


def test_nonce_is_24_chars_of_16_bytes():
    n = utils.get_nonce()
    assert len(n) == 24
    assert len(base64.b64decode(n)) == 16


def test_nonces_do_not_repeat():
    assert len({utils.get_nonce() for _ in range(1000)}) == 1000


def test_hmac_is_sha512_hex():
    sig = utils.get_hmac("https://bittrex.com/api/v1.1/x?apikey=k", "secret")
    expected = hmac.new(b"secret", b"https://bittrex.com/api/v1.1/x?apikey=k", hashlib.sha512).hexdigest()
    assert sig == expected
    assert len(sig) == 128
    assert sig == sig.lower()


def test_build_query_round_trip():
    params = {"market": "BTC-LTC", "nonce": "a+b/c==", "apikey": "key with space", "rate": "0.02"}
    query = utils.build_query(params)
    assert dict(parse_qsl(query)) == params


def test_build_query_drops_none():
    assert utils.build_query({"currency": None, "apikey": "k"}) == "apikey=k"


@pytest.mark.parametrize(
    "path",
    ["/public/getmarkets", "public/getmarkets", "/public/getmarkets/", "public/getmarkets/"],
)
def test_join_url_slashes(path):
    assert (
        utils.join_url("https://bittrex.com/api/", "v1.1", path, query="a=1")
        == "https://bittrex.com/api/v1.1/public/getmarkets?a=1"
    )


def test_join_url_without_query():
    assert utils.join_url("https://bittrex.com/api", "/v1.1/", "x") == "https://bittrex.com/api/v1.1/x"


def test_market_name():
    assert utils.market_name("BTC", "LTC") == "BTC-LTC"


def test_merge_transport_options_later_wins_per_key():
    merged = utils.merge_transport_options(
        {"timeout": 15000, "verify": True},
        {"timeout": 2000, "headers": {"a": "1"}},
        None,
        {"headers": {"b": "2"}},
    )
    assert merged == {"timeout": 2000, "verify": True, "headers": {"b": "2"}}


def test_merge_does_not_mutate_layers():
    defaults = {"timeout": 15000}
    utils.merge_transport_options(defaults, {"timeout": 1})
    assert defaults == {"timeout": 15000}
