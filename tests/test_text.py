from __future__ import annotations

from uvt.oplang import text


def test_find_first_and_last() -> None:
    assert text.findFirst("a:b:c", ':') == 1
    assert text.findLast("a:b:c", ':') == 3
    assert text.findFirst("abc", ':') is None
    assert text.findLast("abc", ':') is None


def test_contains_and_starts_with() -> None:
    assert text.contains("Lang:0", ':')
    assert not text.contains("Lang", ':')
    assert text.startsWith("-f", '-')
    assert not text.startsWith("f-", '-')
    assert not text.startsWith("", '-')


def test_split_on_keeps_inner_empty_parts_but_drops_trailing() -> None:
    assert text.splitOn("a:b", ':') == ["a", "b"]
    assert text.splitOn("a::b", ':') == ["a", "", "b"]
    assert text.splitOn("a:", ':') == ["a"]
    assert text.splitOn(":a", ':') == ["", "a"]
    assert text.splitOn("abc", ':') == ["abc"]


def test_split_once_trims_both_sides() -> None:
    assert text.splitOnce("  Alias , Lang:0x00\t", ',') == ("Alias", "Lang:0x00")
    assert text.splitOnce("a,b,c", ',') == ("a", "b,c")
    assert text.splitOnce("abc", ',') is None


def test_strip_leading_and_trailing() -> None:
    assert text.stripLeading("@Alias", '@') == "Alias"
    assert text.stripLeading("Alias", '@') is None
    assert text.stripLeading("", '@') is None
    assert text.stripTrailing("4)", ')') == "4"
    assert text.stripTrailing("4", ')') is None
    assert text.stripTrailing("", ')') is None


def test_trim_only_spaces_and_tabs() -> None:
    assert text.trim(" \t Lang:0 \t") == "Lang:0"
    assert text.trim("   ") == ""
    assert text.trim("") == ""
    assert text.trim("\nx\n") == "\nx\n"
