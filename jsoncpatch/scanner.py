# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Tokenizer for JSON documents with comments and trailing commas.

Every token keeps its offset and length into the source text, so that
callers can compute edits against the original text without ever
re-serializing it.
"""

import re
from collections import namedtuple

from .log import JSONCSyntaxError


__all__ = ["TokenKind", "Token", "scan", "significant_tokens", "get_eol"]


class TokenKind:
    "Collection of valid values for the kind field of tokens."
    OPEN_BRACE = "{"
    CLOSE_BRACE = "}"
    OPEN_BRACKET = "["
    CLOSE_BRACKET = "]"
    COLON = ":"
    COMMA = ","
    STRING = "string"
    NUMBER = "number"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"
    LINE_COMMENT = "line_comment"
    BLOCK_COMMENT = "block_comment"
    WHITESPACE = "whitespace"
    LINE_BREAK = "line_break"
    EOF = "eof"


TRIVIA = frozenset((
    TokenKind.WHITESPACE,
    TokenKind.LINE_BREAK,
    TokenKind.LINE_COMMENT,
    TokenKind.BLOCK_COMMENT,
))

COMMENTS = frozenset((TokenKind.LINE_COMMENT, TokenKind.BLOCK_COMMENT))


class Token(namedtuple("Token", ["kind", "offset", "length", "text"])):
    __slots__ = ()

    @property
    def end(self):
        return self.offset + self.length


_punctuation = {
    "{": TokenKind.OPEN_BRACE,
    "}": TokenKind.CLOSE_BRACE,
    "[": TokenKind.OPEN_BRACKET,
    "]": TokenKind.CLOSE_BRACKET,
    ":": TokenKind.COLON,
    ",": TokenKind.COMMA,
}

_keywords = {
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
    "null": TokenKind.NULL,
}

_whitespace_re = re.compile(r"[ \t\f\v\u00a0\ufeff]+")
_line_break_re = re.compile(r"\r\n|\r|\n")
_string_re = re.compile(r'"(?:[^"\\\r\n]|\\.)*"')
_number_re = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")
_word_re = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


def scan(text, start=0):
    """Yield the tokens of `text` from offset `start`, ending with EOF.

    Raises JSONCSyntaxError on unterminated strings or block comments
    and on characters that cannot start a token.
    """
    pos = start
    n = len(text)
    while pos < n:
        c = text[pos]

        kind = _punctuation.get(c)
        if kind is not None:
            yield Token(kind, pos, 1, c)
            pos += 1
            continue

        m = _whitespace_re.match(text, pos)
        if m:
            yield Token(TokenKind.WHITESPACE, pos, m.end() - pos, m.group())
            pos = m.end()
            continue

        m = _line_break_re.match(text, pos)
        if m:
            yield Token(TokenKind.LINE_BREAK, pos, m.end() - pos, m.group())
            pos = m.end()
            continue

        if c == '"':
            m = _string_re.match(text, pos)
            if m is None:
                raise JSONCSyntaxError("Unterminated string", pos)
            yield Token(TokenKind.STRING, pos, m.end() - pos, m.group())
            pos = m.end()
            continue

        if text.startswith("//", pos):
            m = _line_break_re.search(text, pos)
            end = m.start() if m else n
            yield Token(TokenKind.LINE_COMMENT, pos, end - pos, text[pos:end])
            pos = end
            continue

        if text.startswith("/*", pos):
            end = text.find("*/", pos + 2)
            if end < 0:
                raise JSONCSyntaxError("Unterminated block comment", pos)
            end += 2
            yield Token(TokenKind.BLOCK_COMMENT, pos, end - pos, text[pos:end])
            pos = end
            continue

        m = _number_re.match(text, pos)
        if m:
            yield Token(TokenKind.NUMBER, pos, m.end() - pos, m.group())
            pos = m.end()
            continue

        m = _word_re.match(text, pos)
        if m and m.group() in _keywords:
            yield Token(_keywords[m.group()], pos, m.end() - pos, m.group())
            pos = m.end()
            continue

        raise JSONCSyntaxError("Unexpected character %r" % c, pos)

    yield Token(TokenKind.EOF, n, 0, "")


def significant_tokens(text, start=0):
    "Yield the tokens of `text` that are not whitespace or comments."
    for token in scan(text, start):
        if token.kind not in TRIVIA:
            yield token


def get_eol(text):
    "Return the line ending used by `text`, defaulting to a newline."
    m = _line_break_re.search(text)
    return m.group() if m else "\n"
