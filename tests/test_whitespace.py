from textify import whitespace


def test_trims():
    assert whitespace.trim_text("  hello  ") == "hello"
    assert whitespace.trim_start("  hello  ") == "hello  "
    assert whitespace.trim_end("  hello  ") == "  hello"


def test_remove_all_whitespace():
    assert whitespace.remove_all_whitespace("hello world\ntest\t!") == "helloworldtest!"


def test_normalize_whitespace_flattens_lines():
    assert whitespace.normalize_whitespace("hello    world") == "hello world"
    assert whitespace.normalize_whitespace("  hello    world  ") == "hello world"
    assert whitespace.normalize_whitespace("a\n\n b\tc") == "a b c"


def test_remove_extra_spaces_keeps_line_breaks():
    assert whitespace.remove_extra_spaces("hello    world\ntest    line") == "hello world\ntest line"
    assert whitespace.remove_extra_spaces("  a  \n\n b ") == "a\n\nb"


def test_remove_empty_lines():
    assert whitespace.remove_empty_lines("line1\n\nline2\n   \nline3") == "line1\nline2\nline3"


def test_trim_lines_preserves_line_count():
    assert whitespace.trim_lines("  line1  \n  line2  ") == "line1\nline2"
    assert whitespace.trim_lines(" a \n\n b ") == "a\n\nb"


def test_indent_lines():
    assert whitespace.indent_lines("line1\nline2", 2) == "  line1\n  line2"
    assert whitespace.indent_lines("line1", 4) == "    line1"
    # negative counts are treated as zero
    assert whitespace.indent_lines("line1", -3) == "line1"


def test_dedent_lines():
    assert whitespace.dedent_lines("  line1\n  line2") == "line1\nline2"
    assert whitespace.dedent_lines("  line1\n    line2") == "line1\n  line2"
    assert whitespace.dedent_lines("    a\n\n    b") == "a\n\nb"
    assert whitespace.dedent_lines("a\n  b") == "a\n  b"
    assert whitespace.dedent_lines("") == ""


def test_tabs_and_spaces():
    assert whitespace.tabs_to_spaces("\thello", 4) == "    hello"
    assert whitespace.tabs_to_spaces("\thello", 2) == "  hello"
    assert whitespace.spaces_to_tabs("    hello", 4) == "\thello"
    assert whitespace.spaces_to_tabs("        x", 4) == "\t\tx"
    assert whitespace.spaces_to_tabs("      x", 4) == "\t  x"
    assert whitespace.spaces_to_tabs("  x", 0) == "  x"


def test_line_endings():
    assert whitespace.normalize_line_endings("line1\r\nline2\rline3") == "line1\nline2\nline3"
    assert whitespace.to_lf("line1\r\nline2") == "line1\nline2"
    assert whitespace.to_crlf("line1\nline2") == "line1\r\nline2"
    assert whitespace.to_crlf("a\r\nb\nc") == "a\r\nb\r\nc"


def test_trailing_newline():
    assert whitespace.ensure_trailing_newline("hello") == "hello\n"
    assert whitespace.ensure_trailing_newline("hello\n") == "hello\n"
    assert whitespace.remove_trailing_newline("hello\n") == "hello"
    assert whitespace.remove_trailing_newline("hello\n\n") == "hello\n"
    assert whitespace.remove_trailing_newline("hello") == "hello"


def test_trailing_newline_round_trip():
    for text in ["hello", "", "a\nb", "  x  "]:
        once = whitespace.ensure_trailing_newline(text)
        assert whitespace.ensure_trailing_newline(once) == once
        assert whitespace.remove_trailing_newline(once) == text


def test_wrap_text():
    text = "The quick brown fox jumps over the lazy dog"
    wrapped = whitespace.wrap_text(text, 20)
    assert all(len(line) <= 20 for line in wrapped.split("\n"))
    assert wrapped == "The quick brown fox\njumps over the lazy\ndog"


def test_wrap_text_long_word_is_not_split():
    assert whitespace.wrap_text("a supercalifragilistic b", 5) == "a\nsupercalifragilistic\nb"


def test_wrap_text_edges():
    assert whitespace.wrap_text("") == ""
    assert whitespace.wrap_text("   ") == ""
    assert whitespace.wrap_text("short text") == "short text"
