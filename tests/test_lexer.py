import pytest

from shellargs import LexError, UnterminatedEscapeError, UnterminatedQuoteError, argv, tokenize


def test_empty_input_has_no_tokens() -> None:
    assert argv("") == []


@pytest.mark.parametrize("text", [" ", "\t", "\n", " \t\n"])
def test_whitespace_only_input_has_no_tokens(text: str) -> None:
    assert argv(text) == []


def test_unquoted_string() -> None:
    assert argv("foo") == ["foo"]


def test_single_and_double_quoted_strings() -> None:
    assert argv("'foo'") == ["foo"]
    assert argv('"foo"') == ["foo"]


def test_other_quote_kind_is_literal_inside_quotes() -> None:
    assert argv('"Don\'t"') == ["Don't"]
    assert argv("'say \"hi\"'") == ['say "hi"']


def test_adjacent_fragments_concatenate() -> None:
    assert argv('"This "is" an "\'argument\'.') == ["This is an argument."]


def test_escaped_quotes_and_backslash() -> None:
    assert argv('\\"') == ['"']
    assert argv("\\'") == ["'"]
    assert argv("\\\\") == ["\\"]


def test_escaped_whitespace_joins_token() -> None:
    assert argv("hello\\ world") == ["hello world"]
    assert argv("a\\\tb c") == ["a\tb", "c"]


def test_no_escape_processing_inside_quotes() -> None:
    assert argv('"a\\b"') == ["a\\b"]
    assert argv("'a\\'") == ["a\\"]


@pytest.mark.parametrize("separator", [" ", "\t", "\n", "  \t "])
def test_whitespace_separates_tokens(separator: str) -> None:
    assert argv(separator.join(["1", "2", "3"])) == ["1", "2", "3"]


def test_leading_and_trailing_whitespace_is_ignored() -> None:
    assert argv("  foo bar  ") == ["foo", "bar"]


def test_quoted_empty_tokens_are_kept() -> None:
    assert argv('""') == [""]
    assert argv("a '' b") == ["a", "", "b"]
    assert argv("--x --y=\"\" --z=''") == ["--x", "--y=", "--z="]


def test_example_command_line() -> None:
    tokens = argv("-x 3 -y 4 -abc -beep=boop foo \"bar\" 'baz'")
    assert tokens == ["-x", "3", "-y", "4", "-abc", "-beep=boop", "foo", "bar", "baz"]


def test_trailing_backslash_fails_with_index() -> None:
    with pytest.raises(UnterminatedEscapeError) as excinfo:
        argv("\\")
    assert excinfo.value.index == 0

    with pytest.raises(UnterminatedEscapeError) as excinfo:
        argv("abc \\")
    assert excinfo.value.index == 4


def test_unterminated_quote_reports_kind_and_start() -> None:
    with pytest.raises(UnterminatedQuoteError) as excinfo:
        argv('"Hello')
    assert excinfo.value.kind == "double"
    assert excinfo.value.start_index == 0

    with pytest.raises(UnterminatedQuoteError) as excinfo:
        argv("ok 'Hello")
    assert excinfo.value.kind == "single"
    assert excinfo.value.start_index == 3


def test_lex_errors_are_value_errors() -> None:
    with pytest.raises(LexError):
        argv("'open")
    with pytest.raises(ValueError, match="Unterminated escape at index 0"):
        argv("\\")


def test_tokenize_is_an_alias() -> None:
    assert tokenize("a b") == argv("a b")
