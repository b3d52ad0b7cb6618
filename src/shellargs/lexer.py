"""Shell-style splitting of a single command-line string."""

from __future__ import annotations

from loguru import logger

from shellargs.errors import UnterminatedEscapeError, UnterminatedQuoteError

WHITESPACE = frozenset(" \t\n")
BACKSLASH = "\\"
QUOTE_KINDS = {"'": "single", '"': "double"}


def argv(text: str) -> list[str]:
    """Split text into tokens the way a shell would build an argument vector.

    Whitespace separates tokens, a backslash escapes the following character and
    single or double quotes open a verbatim region. Adjacent fragments join into
    one token, so ``"This "is" an "'argument'.`` yields ``['This is an argument.']``.

    Raises:
        UnterminatedEscapeError: the input ends with a lone backslash.
        UnterminatedQuoteError: a quote is opened and never closed.
    """

    tokens: list[str] = []
    buffer: list[str] = []
    # A token opened by quotes is emitted even when it stays empty.
    started = False
    index = 0
    length = len(text)

    while index < length:
        char = text[index]

        if char in WHITESPACE:
            if started:
                tokens.append("".join(buffer))
                buffer.clear()
                started = False
            index += 1
            continue

        if char == BACKSLASH:
            if index + 1 >= length:
                logger.debug("lex failed: trailing backslash in {!r}", text)
                raise UnterminatedEscapeError(index)
            buffer.append(text[index + 1])
            started = True
            index += 2
            continue

        if char in QUOTE_KINDS:
            closing = text.find(char, index + 1)
            if closing == -1:
                logger.debug("lex failed: unterminated quote at {} in {!r}", index, text)
                raise UnterminatedQuoteError(QUOTE_KINDS[char], index)
            buffer.append(text[index + 1 : closing])
            started = True
            index = closing + 1
            continue

        buffer.append(char)
        started = True
        index += 1

    if started:
        tokens.append("".join(buffer))

    logger.debug("lexed {} token(s)", len(tokens))
    return tokens


tokenize = argv
