import io
import string

from practicekit.rot import RotDecoder, rotate_bytes


def test_joke():
    rot = RotDecoder(io.BytesIO(b"Gb trg gb gur bgure fvqr!"), 13)
    assert rot.read().decode("ascii") == "To get to the other side!"


def test_binary():
    data = bytes(range(256))
    rot = RotDecoder(io.BytesIO(data), 13)
    out = rot.read(256)
    assert len(out) == 256
    for before, after in zip(data, out):
        if before != after:
            assert chr(before) in string.ascii_letters
            assert chr(after) in string.ascii_letters


def test_rot13_round_trip():
    text = b"The Quick Brown Fox, 123!"
    assert rotate_bytes(rotate_bytes(text, 13), 13) == text


def test_rotation_inverse():
    text = string.ascii_letters.encode("ascii")
    assert rotate_bytes(rotate_bytes(text, 5), 21) == text


def test_non_letters_unchanged():
    text = b"0123456789 !@#[]{}`~\x00\xff"
    assert rotate_bytes(text, 7) == text


def test_case_preserved():
    out = rotate_bytes(string.ascii_uppercase.encode(), 3)
    assert out.isupper()
    assert sorted(out) == sorted(string.ascii_uppercase.encode())


def test_chunked_reads_match_whole_read():
    text = b"Gb trg gb gur bgure fvqr!"
    chunked = RotDecoder(io.BytesIO(text), 13)
    pieces = []
    while chunk := chunked.read(4):
        pieces.append(chunk)
    assert b"".join(pieces) == RotDecoder(io.BytesIO(text), 13).read()