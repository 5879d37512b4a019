import os

import pytest

from cpamm.pubkey import Pubkey, b58decode, b58encode

SOL_MINT = "So11111111111111111111111111111111111111112"


def test_encode_empty_and_zero_bytes():
    assert b58encode(b"") == ""
    assert b58encode(b"\x00\x00") == "11"


@pytest.mark.parametrize("length", [1, 5, 32, 64])
def test_round_trip_random_bytes(length):
    data = os.urandom(length)
    assert b58decode(b58encode(data)) == data


def test_round_trip_with_leading_zeros():
    data = b"\x00\x00\x01\x02"
    assert b58decode(b58encode(data)) == data


def test_decode_rejects_invalid_character():
    with pytest.raises(ValueError):
        b58decode("0OIl")


def test_from_string_round_trip():
    key = Pubkey.from_string(SOL_MINT)
    assert len(key.to_bytes()) == 32
    assert str(key) == SOL_MINT


def test_default_is_all_ones_text():
    key = Pubkey.default()
    assert key.to_bytes() == bytes(32)
    assert str(key) == "1" * 32


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        Pubkey(b"\x01" * 31)
    with pytest.raises(ValueError):
        Pubkey.from_string("2")


def test_ordering_follows_bytes():
    low = Pubkey(b"\x00" * 31 + b"\x01")
    high = Pubkey(b"\x01" + b"\x00" * 31)
    assert low < high
    assert max(low, high) == high
    assert min(low, high).to_bytes() == low.to_bytes()


def test_equality_and_hash():
    a = Pubkey.from_string(SOL_MINT)
    b = Pubkey(a.to_bytes())
    assert a == b
    assert len({a, b}) == 1