import pytest

from linkedqueue.utils import buffer_to_str, copy_to_buffer, to_text


def test_to_text_copies_str():
    assert to_text("abc") == "abc"
    assert type(to_text("abc")) is str


def test_to_text_decodes_bytes_like():
    raw = bytearray("héllo".encode("utf-8"))
    text = to_text(memoryview(raw))
    raw[:] = b"xxxxxx"
    assert text == "héllo"
    assert to_text(b"plain") == "plain"


def test_to_text_rejects_other_types():
    with pytest.raises(TypeError):
        to_text(None)
    with pytest.raises(TypeError):
        to_text(3.5)


def test_copy_to_buffer_fits():
    buf = bytearray(b"\xff" * 6)
    assert copy_to_buffer("hi", buf) == 2
    assert bytes(buf) == b"hi\x00\xff\xff\xff"


def test_copy_to_buffer_exact_capacity():
    buf = bytearray(3)
    assert copy_to_buffer("abc", buf) == 2
    assert bytes(buf) == b"ab\x00"


def test_copy_to_buffer_capacity_one_writes_terminator_only():
    buf = bytearray(b"zz")
    assert copy_to_buffer("abc", buf, 1) == 0
    assert bytes(buf) == b"\x00z"


def test_copy_to_buffer_empty_value():
    buf = bytearray(b"zz")
    assert copy_to_buffer("", buf) == 0
    assert bytes(buf) == b"\x00z"


def test_copy_to_buffer_truncates_multibyte():
    buf = bytearray(3)
    copy_to_buffer("héllo", buf)
    assert bytes(buf) == b"h\xc3\x00"
    assert buffer_to_str(buf) == "h�"


def test_buffer_to_str_without_terminator():
    assert buffer_to_str(b"abc") == "abc"
    assert buffer_to_str(bytearray(b"ab\x00cd")) == "ab"


def test_to_text_ignores_str_subclass_override():
    class Labelled(str):
        def __str__(self):
            return "other"

    text = to_text(Labelled("abc"))
    assert text == "abc"
    assert type(text) is str


def test_to_text_rejects_lone_surrogate():
    with pytest.raises(UnicodeEncodeError):
        to_text("a\ud800b")
