"""shellargs - shell-style splitting and structured command-line arguments."""

from loguru import logger

from .args import EMPTY_ARGS, StructuredArgs, build
from .classifier import OptionCallbacks, OptionClassifier, classify
from .errors import (
    ArgumentLookupError,
    ArityError,
    LexError,
    MissingOptionError,
    MissingParameterError,
    OptionArityError,
    ShellArgsError,
    UnterminatedEscapeError,
    UnterminatedQuoteError,
    ValidationError,
)
from .lexer import argv, tokenize
from .options import Absent, Multiple, OptionValue, Single
from .printer import ArgsPrinter

logger.disable("shellargs")

__version__ = "0.1.0"

__all__ = [
    "EMPTY_ARGS",
    "Absent",
    "ArgsPrinter",
    "ArgumentLookupError",
    "ArityError",
    "LexError",
    "MissingOptionError",
    "MissingParameterError",
    "Multiple",
    "OptionArityError",
    "OptionCallbacks",
    "OptionClassifier",
    "OptionValue",
    "ShellArgsError",
    "Single",
    "StructuredArgs",
    "UnterminatedEscapeError",
    "UnterminatedQuoteError",
    "ValidationError",
    "argv",
    "build",
    "classify",
    "tokenize",
]
