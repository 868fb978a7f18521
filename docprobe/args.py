from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence

KEY_FLAG = "--key"
VALUE_FLAG = "--value"


class Operation(enum.Enum):
    READ = "read"
    WRITE = "write"


class ParseError(Exception):
    pass


@dataclass(frozen=True)
class ParsedArguments:
    operations: tuple[Operation, ...]
    key: str | None = None
    value: str | None = None

    def write_payload(self, default_key: str, default_value: str) -> dict[str, str]:
        """The single-field document every write in this run submits."""
        key = self.key if self.key is not None else default_key
        value = self.value if self.value is not None else default_value
        return {key: value}


def parse_arguments(tokens: Sequence[str]) -> ParsedArguments:
    """
    Parse ``read``/``write`` operations plus optional ``--key K`` / ``--value V``.

    Operations run in the order given and may repeat. The flags apply to every
    write; the last occurrence of a flag wins. The token after a flag is taken
    verbatim.
    """
    operations: list[Operation] = []
    key: str | None = None
    value: str | None = None

    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token == Operation.READ.value:
            operations.append(Operation.READ)
        elif token == Operation.WRITE.value:
            operations.append(Operation.WRITE)
        elif token in (KEY_FLAG, VALUE_FLAG):
            if i + 1 >= len(tokens):
                raise ParseError(f"{token} requires a value")
            i += 1
            if token == KEY_FLAG:
                key = tokens[i]
            else:
                value = tokens[i]
        else:
            raise ParseError(
                f'invalid argument: {token} (must be "read", "write", "{KEY_FLAG}" or "{VALUE_FLAG}")'
            )
        i += 1

    if not operations:
        raise ParseError('no operations specified; one or more of "read" or "write" is required')

    return ParsedArguments(operations=tuple(operations), key=key, value=value)
