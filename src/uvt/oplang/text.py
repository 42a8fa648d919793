#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from .. import common


BLANK_CHARS = (common.CHAR_BLANK_SPACE, common.CHAR_BLANK_TAB)


def findFirst(s, c):
    index = s.find(c)
    return None if index == -1 else index


def findLast(s, c):
    index = s.rfind(c)
    return None if index == -1 else index


def contains(s, c):
    return c in s


def startsWith(s, c):
    # Also false for empty strings
    return s[:1] == c


def splitOn(s, c):
    """
    Splits `s` into parts separated by `c`.
    Empty parts are kept, except for a trailing one.
    """

    parts = s.split(c)
    if parts and not parts[-1]:
        parts.pop()

    return parts


def trim(s):
    start = 0
    end = len(s)

    while start < end and s[start] in BLANK_CHARS:
        start += 1

    while end > start and s[end - 1] in BLANK_CHARS:
        end -= 1

    return s[start:end]


def splitOnce(s, c):
    index = findFirst(s, c)
    if index is None:
        return None

    return trim(s[:index]), trim(s[index + 1:])


def stripLeading(s, c):
    if not startsWith(s, c):
        return None

    return s[1:]


def stripTrailing(s, c):
    if not s or s[-1] != c:
        return None

    return s[:-1]
