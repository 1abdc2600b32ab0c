"""Pretty command line formatter: multi-line layout, operator breaks, flag highlighting."""

__version__ = "1.0.1"

from shinycmd.classifier import ClassifiedPart, PartKind, classify, parse_command
from shinycmd.config import LayoutConfig
from shinycmd.heuristics import should_prettify
from shinycmd.layout import FormatResult, prettify, prettify_result
from shinycmd.preview import CommandPreview, preview, prettify_batch
from shinycmd.tokenizer import Token, TokenizeError, tokenize

__all__ = [
    "ClassifiedPart",
    "CommandPreview",
    "FormatResult",
    "LayoutConfig",
    "PartKind",
    "Token",
    "TokenizeError",
    "classify",
    "parse_command",
    "prettify",
    "prettify_batch",
    "prettify_result",
    "preview",
    "should_prettify",
    "tokenize",
]
