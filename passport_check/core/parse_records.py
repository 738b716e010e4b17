"""Record Tokenizer — raw text blob to an ordered sequence of read-only records.

Invariants:
    - Blocks are separated by a blank line; fields by ASCII whitespace
    - A field splits on its FIRST ':' (value may itself contain ':')
    - A token without ':' raises MalformedFieldError (corrupt input is fatal)
    - Blocks with no tokens (trailing or repeated blank lines) yield no record
    - Pure: no IO, output depends only on the input text

Design Decisions:
    - Split on ASCII whitespace only: spaces, tabs and line breaks inside a
      block are equivalent; other Unicode spaces stay part of the value
    - Generator + eager wrapper: the shell picks lazy or materialized
"""

import re
from collections.abc import Iterator
from types import MappingProxyType

from passport_check.core.domain_types import Record
from passport_check.core.errors import MalformedFieldError

BLOCK_SEPARATOR = "\n\n"
FIELD_SEPARATOR = ":"
ASCII_WHITESPACE = " \t\r\n"
_TOKEN_SPLIT_RE = re.compile(r"[ \t\r\n]+")


def split_blocks(text: str) -> list[str]:
    """Split the blob on blank lines, dropping blocks that hold only whitespace."""
    normalized = text.replace("\r\n", "\n")
    return [block for block in normalized.split(BLOCK_SEPARATOR) if block.strip(ASCII_WHITESPACE)]


def parse_field(token: str, record_index: int) -> tuple[str, str]:
    name, sep, value = token.partition(FIELD_SEPARATOR)
    if not sep:
        raise MalformedFieldError(token, record_index)
    return name, value


def parse_record(block: str, record_index: int = 0) -> Record:
    """Parse one block into a record. Later duplicates of a name win."""
    tokens = _TOKEN_SPLIT_RE.split(block.strip(ASCII_WHITESPACE))
    fields = dict(parse_field(token, record_index) for token in tokens if token)
    return MappingProxyType(fields)


def iter_records(text: str) -> Iterator[Record]:
    for index, block in enumerate(split_blocks(text)):
        yield parse_record(block, index)


def read_records(text: str) -> list[Record]:
    return list(iter_records(text))
