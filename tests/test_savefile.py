import struct

import pytest

from famclicker.savefile import SIZE, SaveData, decode, encode, read, write


def test_defaults_match_new_game():
    data = SaveData()
    assert (data.score, data.clicks, data.click_value) == (0, 0, 1)
    assert data.auto_clicker_value == 0
    assert data.auto_clicker_upgrade_cost == 1000
    assert data.upgrade_cost == 50
    assert data.auto_clicker_enabled is False


def test_encoded_size_is_six_ints_and_a_bool():
    assert len(encode(SaveData())) == SIZE == 25


def test_encoding_is_big_endian():
    raw = encode(SaveData(score=1))
    assert raw[:4] == b"\x00\x00\x00\x01"
    assert raw[-1:] == b"\x00"


def test_encoded_fields_in_order():
    data = SaveData(7, 3, 2, 4, 10000, 100, True)
    assert struct.unpack(">6i?", encode(data)) == (7, 3, 2, 4, 10000, 100, True)


def test_round_trip():
    data = SaveData(123, 45, 6, 7, 10000, 400, True)
    assert decode(encode(data)) == data


def test_negative_values_round_trip():
    data = SaveData(score=-5)
    assert decode(encode(data)).score == -5


def test_trailing_bytes_ignored():
    data = SaveData(score=9)
    assert decode(encode(data) + b"extra") == data


def test_truncated_data_rejected():
    with pytest.raises(ValueError):
        decode(encode(SaveData())[:-1])


def test_empty_data_rejected():
    with pytest.raises(ValueError):
        decode(b"")


def test_out_of_range_value_rejected():
    with pytest.raises(ValueError):
        encode(SaveData(score=2**31))


def test_file_round_trip(tmp_path):
    path = tmp_path / "game.savefile"
    data = SaveData(500, 20, 3, 1, 10000, 200, True)
    write(path, data)
    assert read(path) == data
    assert path.stat().st_size == SIZE


def test_read_missing_file(tmp_path):
    with pytest.raises(OSError):
        read(tmp_path / "absent.savefile")