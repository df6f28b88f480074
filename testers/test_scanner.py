# -*- coding: utf-8 -*-
import pytest

from scenebake.errors import FormatError
from scenebake.utils.scanner import LineScanner, tokenize


def test_next_line_walks_buffer():
    s = LineScanner(b"v 1 2 3\r\nvn 0 0 1\nf 1//1 1//1 1//1")
    line, cur = s.next_line(0)
    assert line == "v 1 2 3"
    line, cur = s.next_line(cur)
    assert line == "vn 0 0 1"
    line, cur = s.next_line(cur)
    assert line == "f 1//1 1//1 1//1"
    assert cur is None
    assert s.next_line(cur) == ("", None)


def test_lines_restart_from_start():
    s = LineScanner(b"a\nb\n\nc\n")
    first = list(s.lines())
    second = list(s.lines())
    assert first == second == ["a", "b", "", "c"]


def test_long_line_is_truncated():
    s = LineScanner(b"g " + b"x" * 100 + b"\nv 0 0 0", max_line_length=10)
    lines = list(s.lines())
    assert lines[0] == "g xxxxxxxx"
    assert lines[1] == "v 0 0 0"


def test_tokenize_comment_and_blank():
    assert tokenize("# comment").empty
    assert not tokenize("# comment").blank
    assert tokenize("   ").empty
    assert tokenize("   ").blank
    r = tokenize("usemtl  Metal ", 7, "a.obj")
    assert r.header == "usemtl"
    assert r.args == ("Metal",)
    assert r.line == 7


def test_expect_converts_and_checks_arity():
    assert tokenize("Ks 1 0.5 0").expect(3, float) == [1.0, 0.5, 0.0]
    with pytest.raises(FormatError, match="expects 3"):
        tokenize("Ks 1 0.5", 4, "x.mtl").expect(3, float)
    with pytest.raises(FormatError, match="malformed"):
        tokenize("Ns shiny").expect(1, float)


def test_format_error_carries_location():
    with pytest.raises(FormatError) as info:
        tokenize("newmtl", 12, "lib.mtl").value()
    assert info.value.line == 12
    assert str(info.value).startswith("lib.mtl:12:")
