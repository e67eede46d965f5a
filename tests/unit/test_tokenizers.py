from typing import List

import pytest

from byte_efficiency.domain.exceptions import TokenizeError
from byte_efficiency.domain.models import Token, TokenType
from byte_efficiency.tokenizers.base import BaseTokenizer
from byte_efficiency.tokenizers.css import CssTokenizer
from byte_efficiency.tokenizers.javascript import JavaScriptTokenizer


class _ExplodingTokenizer(BaseTokenizer):
    def _scan(self, source: str) -> List[Token]:
        raise RuntimeError("scanner bug")


@pytest.fixture
def js() -> JavaScriptTokenizer:
    return JavaScriptTokenizer()


@pytest.fixture
def css() -> CssTokenizer:
    return CssTokenizer()


def test_javascript_tokens_carry_type_and_literal_text(js):
    tokens = js.tokenize("var x = 'a b';")

    assert [token.type for token in tokens] == [
        TokenType.KEYWORD,
        TokenType.IDENTIFIER,
        TokenType.PUNCTUATOR,
        TokenType.STRING,
        TokenType.PUNCTUATOR,
    ]
    assert [token.value for token in tokens] == ["var", "x", "=", "'a b'", ";"]


def test_javascript_comments_and_whitespace_are_dropped(js):
    tokens = js.tokenize("// leading\n/* block */\n  foo  \n")

    assert tokens == [Token(type=TokenType.IDENTIFIER, value="foo")]


def test_javascript_literal_classification(js):
    tokens = js.tokenize("if (true) { n = null; r = /ab+c/g; k = 42; }")
    by_value = {token.value: token.type for token in tokens}

    assert by_value["if"] is TokenType.KEYWORD
    assert by_value["true"] is TokenType.BOOLEAN
    assert by_value["null"] is TokenType.NULL
    assert by_value["/ab+c/g"] is TokenType.REGULAR_EXPRESSION
    assert by_value["42"] is TokenType.NUMERIC


def test_javascript_empty_source_has_no_tokens(js):
    assert js.tokenize("") == []


@pytest.mark.parametrize("source", ["var s = 'unterminated", "a = 1 @ 2;"])
def test_javascript_invalid_source_raises_tokenize_error(js, source):
    with pytest.raises(TokenizeError) as exc_info:
        js.tokenize(source)

    assert exc_info.value.context["line"] == 1


def test_css_drops_whitespace_and_comments(css):
    tokens = css.tokenize("/* header */\nbody {\n  color: red;\n}\n")

    assert [token.value for token in tokens] == ["body", "{", "color:", "red;", "}"]
    assert all(token.type is TokenType.OTHER for token in tokens)


def test_css_keeps_license_comments_and_strings(css):
    tokens = css.tokenize('/*! MIT */\na{content:"x  y"}')

    assert [token.value for token in tokens] == [
        "/*! MIT */",
        "a{content:",
        '"x  y"',
        "}",
    ]
    assert tokens[2].type is TokenType.STRING


def test_css_handles_escaped_quotes_and_lone_slash(css):
    tokens = css.tokenize("a{content:'it\\'s';width:calc(1px/2)}")

    assert [token.value for token in tokens] == [
        "a{content:",
        "'it\\'s'",
        ";width:calc(1px",
        "/",
        "2)}",
    ]


@pytest.mark.parametrize("source", ["a { } /* open", "a { content: 'x }"])
def test_css_unbalanced_input_raises_tokenize_error(css, source):
    with pytest.raises(TokenizeError):
        css.tokenize(source)


def test_unexpected_scanner_failure_is_wrapped():
    with pytest.raises(TokenizeError) as exc_info:
        _ExplodingTokenizer().tokenize("anything")

    assert exc_info.value.context["tokenizer"] == "_ExplodingTokenizer"
