import pytest

from keylog_compare import utils


def test_flip_case_swaps_letters_only():
    assert utils.flip_case(ord("a")) == ord("A")
    assert utils.flip_case(ord("Z")) == ord("z")
    assert utils.flip_case(ord("1")) == ord("1")
    assert utils.flip_case(ord("@")) == ord("@")
    assert utils.flip_case(ord("[")) == ord("[")


def test_is_ascii_handles_each_log_type():
    assert utils.is_ascii("abc\t\0")
    assert utils.is_ascii(memoryview(b"abc"))
    assert not utils.is_ascii(bytearray(b"\x80"))
    assert not utils.is_ascii(memoryview(b"ok\xff"))


def test_decode_escapes_produces_markers():
    assert utils.decode_escapes("ab\\0c\\t") == b"ab\x00c\t"
    assert utils.decode_escapes("\\x41\\\\") == b"A\\"


@pytest.mark.parametrize("text", ["café", "\\xe9", "trailing\\"])
def test_decode_escapes_rejects_bad_input(text):
    with pytest.raises(utils.InputLogError):
        utils.decode_escapes(text)


def test_render_applies_backspace_and_caps_lock():
    assert utils.render("abc\t\0C") == "abc"
    assert utils.render(b"\0abc") == "abc"
    assert utils.render("a\tb\tc") == "aBc"
    assert utils.render("#a^b", backspace=ord("#"), caps_lock=ord("^")) == "aB"


def test_display_shows_marker_glyphs():
    assert utils.display(b"ab\x00\tc\x01") == "ab⌫⇪c\\x01"
