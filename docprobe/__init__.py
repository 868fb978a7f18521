from __future__ import annotations

from .args import Operation, ParsedArguments, ParseError, parse_arguments
from .completion import AwaitableCompletion
from .status import error_name

__all__ = [
    "Operation",
    "ParsedArguments",
    "ParseError",
    "parse_arguments",
    "AwaitableCompletion",
    "error_name",
]
