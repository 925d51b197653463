from keylog_compare.core.cursor import ReverseResolvingCursor


def test_yields_characters_last_first():
    cursor = ReverseResolvingCursor("abc")
    assert list(cursor) == [(ord("c"), False), (ord("b"), False), (ord("a"), False)]


def test_backspaces_skip_earlier_characters():
    cursor = ReverseResolvingCursor(b"abxxx\0\0\0c")
    assert [code for code, _ in cursor] == [ord("c"), ord("b"), ord("a")]


def test_leading_backspace_is_inert():
    cursor = ReverseResolvingCursor(b"\0abc")
    assert [chr(code) for code, _ in cursor] == ["c", "b", "a"]
    assert cursor.caps_toggled_at_front is False


def test_toggle_is_attached_to_the_character_before_it():
    cursor = ReverseResolvingCursor("a\tb\tc")
    assert cursor.advance() == (ord("c"), False)
    assert cursor.advance() == (ord("b"), True)
    assert cursor.advance() == (ord("a"), True)
    assert cursor.advance() is None


def test_double_toggle_cancels_out():
    cursor = ReverseResolvingCursor(b"a\t\tb")
    assert cursor.advance() == (ord("b"), False)
    assert cursor.advance() == (ord("a"), False)


def test_backspace_does_not_remove_toggles():
    cursor = ReverseResolvingCursor(b"a\tx\0b")
    assert cursor.advance() == (ord("b"), False)
    assert cursor.advance() == (ord("a"), True)


def test_front_toggle_recorded_on_exhaustion():
    cursor = ReverseResolvingCursor(b"\tabc")
    assert cursor.caps_toggled_at_front is False
    list(cursor)
    assert cursor.exhausted is True
    assert cursor.caps_toggled_at_front is True
    assert cursor.is_caps_toggled_at_front() is True


def test_exhaustion_is_sticky():
    cursor = ReverseResolvingCursor(b"\t")
    assert cursor.advance() is None
    assert cursor.advance() is None
    assert cursor.caps_toggled_at_front is True


def test_length_hint_is_an_upper_bound():
    cursor = ReverseResolvingCursor(b"ab\0\0")
    assert cursor.__length_hint__() == 4
    assert cursor.advance() is None
    assert cursor.remaining == 0


def test_remaining_shrinks_as_bytes_are_consumed():
    cursor = ReverseResolvingCursor(b"ab\tc")
    seen = [cursor.remaining]
    while cursor.advance() is not None:
        seen.append(cursor.remaining)
    assert seen == [4, 3, 1, 0]


def test_custom_markers():
    cursor = ReverseResolvingCursor("ab#^c", backspace=ord("#"), caps_lock=ord("^"))
    assert cursor.advance() == (ord("c"), False)
    assert cursor.advance() == (ord("a"), True)
    assert cursor.advance() is None


def test_accepts_memoryview_and_bytearray():
    for log in (memoryview(b"ax\0"), bytearray(b"ax\0")):
        cursor = ReverseResolvingCursor(log)
        assert list(cursor) == [(ord("a"), False)]
