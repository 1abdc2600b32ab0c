"""Quote-aware shell tokenizer: splits a command into words and control operators."""

from __future__ import annotations

from dataclasses import dataclass

# Longest first so "&&" wins over "&" and ">>" over ">"
OPERATORS: tuple[str, ...] = (
    ";;", "&&", "||", "|&", ">>", ">&", "&>",
    ";", "|", "&", ">", "<", "(", ")",
)

# The word after a redirection is its target, not a new command
REDIRECT_OPERATORS: frozenset[str] = frozenset({">", ">>", "<", ">&", "&>"})

_OPERATOR_CHARS = frozenset("".join(OPERATORS))

# Characters a backslash escapes inside double quotes (POSIX)
_DQUOTE_ESCAPABLE = frozenset('"\\$`\n')


class TokenizeError(ValueError):
    """Raised when a command cannot be split into tokens (e.g. unbalanced quotes)."""


@dataclass(frozen=True)
class Token:
    value: str
    quoted: bool = False
    is_operator: bool = False


def _match_operator(chars: str, i: int) -> str | None:
    for op in OPERATORS:
        if chars.startswith(op, i):
            return op
    return None


def tokenize(cmd: str) -> list[Token]:
    """Split a shell command into word and operator tokens.

    Single quotes, double quotes and backslash escapes are honored, so
    quoted whitespace or operator characters stay part of the word.
    Quotes are removed from the emitted value. An unquoted ``#`` at the
    start of a word begins a comment running to the end of input.

    Raises TokenizeError on an unclosed quote or a trailing backslash.
    """
    tokens: list[Token] = []
    current: list[str] = []
    in_word = False
    quoted = False
    in_single = False
    in_double = False
    i = 0

    while i < len(cmd):
        ch = cmd[i]

        if in_single:
            if ch == "'":
                in_single = False
            else:
                current.append(ch)
            i += 1
            continue

        if in_double:
            if ch == '"':
                in_double = False
            elif ch == "\\" and i + 1 < len(cmd) and cmd[i + 1] in _DQUOTE_ESCAPABLE:
                # Escaped newline is a line continuation and vanishes
                if cmd[i + 1] != "\n":
                    current.append(cmd[i + 1])
                i += 2
                continue
            else:
                current.append(ch)
            i += 1
            continue

        # Handle escapes
        if ch == "\\":
            if i + 1 >= len(cmd):
                raise TokenizeError("No escaped character after trailing backslash")
            if cmd[i + 1] != "\n":
                current.append(cmd[i + 1])
                in_word = True
            i += 2
            continue

        # Open quotes
        if ch == "'":
            in_single = True
            in_word = quoted = True
            i += 1
            continue
        if ch == '"':
            in_double = True
            in_word = quoted = True
            i += 1
            continue

        if ch.isspace():
            if in_word:
                tokens.append(Token("".join(current), quoted=quoted))
                current, in_word, quoted = [], False, False
            i += 1
            continue

        if ch == "#" and not in_word:
            break

        op = _match_operator(cmd, i) if ch in _OPERATOR_CHARS else None
        if op:
            if in_word:
                tokens.append(Token("".join(current), quoted=quoted))
                current, in_word, quoted = [], False, False
            tokens.append(Token(op, is_operator=True))
            i += len(op)
            continue

        current.append(ch)
        in_word = True
        i += 1

    if in_single or in_double:
        raise TokenizeError("No closing quotation")

    if in_word:
        tokens.append(Token("".join(current), quoted=quoted))

    return tokens
