import io

from plane_data.codec import decode, dumps, encode, loads, read_record
from plane_data.records import MAX_RECORDS, Record


def _rec(i):
    return Record(f"Plane {i}", f"{100 + i}", f"{10 + i} m", f"Description of plane {i}")


def _text(n):
    return dumps([_rec(i) for i in range(n)])


def test_two_records_layout():
    text = dumps([_rec(0), _rec(1)])
    assert text == (
        "Plane 0\n100\n10 m\nDescription of plane 0\n"
        "\n"
        "Plane 1\n101\n11 m\nDescription of plane 1"
    )
    assert not text.endswith("\n")
    assert loads(text) == [_rec(0), _rec(1)]


def test_single_record_has_no_separator():
    assert dumps([_rec(3)]) == "Plane 3\n103\n13 m\nDescription of plane 3"


def test_encode_nothing():
    buf = io.StringIO()
    encode([], buf)
    assert buf.getvalue() == ""


def test_round_trip_normalizes():
    recs = [Record("  Boeing 747  ", " 570 ", "64.4 m\t", " Wide-body airliner ")]
    assert loads(dumps(recs)) == [Record("Boeing 747", "570", "64.4 m", "Wide-body airliner")]


def test_round_trip_up_to_capacity():
    for n in range(1, MAX_RECORDS + 1):
        assert loads(_text(n)) == [_rec(i) for i in range(n)]


def test_long_fields_are_cut():
    rec = Record("N" * 80, "9" * 15, "W" * 30, "D" * 150)
    out = loads(dumps([rec]))[0]
    assert out == Record("N" * 49, "9" * 9, "W" * 19, "D" * 99)


def test_extra_blank_lines_between_records():
    plain = _text(3)
    padded = "\n\n\n" + plain.replace("\n\nPlane", "\n\n\n\n\nPlane")
    assert loads(padded) == loads(plain)


def test_blank_line_inside_record_is_a_value():
    rec = loads("Plane A\n\n12 m\nTrainer")[0]
    assert rec == Record("Plane A", "", "12 m", "Trainer")


def test_whitespace_only_line_is_not_skipped():
    store = loads("   \n200\n9 m\nGlider")
    assert store == [Record("", "200", "9 m", "Glider")]


def test_partial_trailing_record_is_dropped():
    text = _text(3) + "\n\nPlane X\n999"
    assert loads(text) == [_rec(i) for i in range(3)]


def test_partial_only_record():
    assert len(loads("Plane X\n999\n")) == 0


def test_empty_input():
    assert len(loads("")) == 0
    assert len(loads("\n\n\n")) == 0


def test_capacity_boundary():
    store = loads(_text(15))
    assert len(store) == MAX_RECORDS
    assert list(store) == [_rec(i) for i in range(MAX_RECORDS)]


def test_trailing_newline_is_accepted():
    assert loads(_text(2) + "\n") == [_rec(0), _rec(1)]


def test_empty_last_description_is_lost():
    # the last line is empty with no newline, so the reader sees end of stream
    assert len(loads(dumps([Record("A", "1", "2", "")]))) == 0


def test_read_record_leaves_stream_after_record():
    stream = io.StringIO(_text(2))
    assert read_record(stream) == _rec(0)
    assert read_record(stream) == _rec(1)
    assert read_record(stream) is None


def test_decode_custom_capacity():
    assert len(decode(io.StringIO(_text(5)), capacity=2)) == 2


def test_loads_crlf_separators():
    text = _text(2).replace("\n", "\r\n")
    assert loads(text) == [_rec(0), _rec(1)]
