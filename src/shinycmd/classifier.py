"""Token classification: command heads, arguments, flags and operators."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from shinycmd.tokenizer import REDIRECT_OPERATORS, Token, tokenize

# "-5", "-1.5": numeric arguments, never short options
_NEGATIVE_NUMBER = re.compile(r"^-\d")


class PartKind(str, Enum):
    COMMAND = "command"
    ARGUMENT = "argument"
    OPERATOR = "operator"


@dataclass(frozen=True)
class ClassifiedPart:
    kind: PartKind
    value: str
    is_long_option: bool = False
    is_short_option: bool = False

    @property
    def is_option(self) -> bool:
        return self.is_long_option or self.is_short_option


def is_long_option(value: str) -> bool:
    return value.startswith("--")


def is_short_option(value: str) -> bool:
    return (
        value.startswith("-")
        and not value.startswith("--")
        and len(value) > 1
        and not _NEGATIVE_NUMBER.match(value)
    )


def classify(tokens: list[Token]) -> list[ClassifiedPart]:
    """Classify tokens in order, one part per token.

    The first non-operator token after the start or after a control
    operator is the command head. Redirections leave the head state alone,
    so their target is an argument. Flags are always arguments but still
    occupy the head position, so a word following a leading flag is an
    argument.
    """
    parts: list[ClassifiedPart] = []
    expect_command = True

    for token in tokens:
        if token.is_operator:
            parts.append(ClassifiedPart(kind=PartKind.OPERATOR, value=token.value))
            if token.value not in REDIRECT_OPERATORS:
                expect_command = True
            continue

        long_opt = is_long_option(token.value)
        short_opt = not long_opt and is_short_option(token.value)
        if long_opt or short_opt:
            kind = PartKind.ARGUMENT
        else:
            kind = PartKind.COMMAND if expect_command else PartKind.ARGUMENT
        expect_command = False

        parts.append(
            ClassifiedPart(
                kind=kind,
                value=token.value,
                is_long_option=long_opt,
                is_short_option=short_opt,
            )
        )

    return parts


def parse_command(command: str) -> list[ClassifiedPart]:
    """Tokenize and classify a command string. Raises TokenizeError on bad quoting."""
    return classify(tokenize(command))
