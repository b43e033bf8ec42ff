"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/formatter.py
Serializes file records into comma-delimited text lines.

LINE FORMAT
-----------
Columns are always written in the order declared by Column. Every field is
followed by ',' (including the last one), then a newline:

    Size,HashValue,"FileName","DirectoryName","Attributes",Created,Modified,Accessed,

FileName and DirectoryName are quoted and control-escaped, Attributes is quoted
only, every other column is plain text. The header goes through the same quoting.

ESCAPING
--------
Exactly nine control characters are rewritten in caret notation:
    NUL ^@   BEL ^G   BS ^H   TAB ^I   LF ^J   FF ^L   CR ^M   ESC ^[   DEL ^?
Everything else passes through unchanged.
"""

import sys
from typing import Dict, Iterable, List, Optional

from dupehash.core.interfaces import TextSink
from dupehash.core.models import ALL_COLUMNS, Column, FileRecord
from dupehash.utils.convert_utils import ConvertUtils

FIELD_SEPARATOR = ","
QUOTE = "\""
FLUSH_INTERVAL = 10

CONTROL_CHARACTER_ESCAPES = str.maketrans({
    "\x00": "^@",
    "\x07": "^G",
    "\x08": "^H",
    "\x09": "^I",
    "\x0A": "^J",
    "\x0C": "^L",
    "\x0D": "^M",
    "\x1B": "^[",
    "\x7F": "^?",
})

_ESCAPED_COLUMNS = frozenset({Column.FILE_NAME, Column.DIRECTORY_NAME})
_QUOTED_COLUMNS = _ESCAPED_COLUMNS | {Column.ATTRIBUTES}


def encode_control_characters(raw_value: str) -> str:
    """Rewrites the nine escaped control characters in caret notation."""
    return raw_value.translate(CONTROL_CHARACTER_ESCAPES)


class DataFormatter:
    """
    Writes one line per header or record to a text sink and flushes the sink
    after every FLUSH_INTERVAL lines.
    """

    def __init__(self, writer: Optional[TextSink] = None, columns: Iterable[Column] = ALL_COLUMNS):
        self._writer = writer if writer is not None else sys.stdout
        selected = frozenset(columns)
        self._columns: List[Column] = [c for c in Column.get_all() if c in selected]
        self._writes = 0

    @property
    def columns(self) -> List[Column]:
        return list(self._columns)

    @property
    def lines_written(self) -> int:
        return self._writes

    def write_header(self) -> None:
        self._write_fields({column: column.value for column in Column})

    def write_record(self, record: FileRecord) -> None:
        self._write_fields({
            Column.SIZE: str(record.size),
            Column.HASH_VALUE: ConvertUtils.hash_to_hex(record.digest),
            Column.FILE_NAME: record.name,
            Column.DIRECTORY_NAME: record.directory,
            Column.ATTRIBUTES: record.attributes,
            Column.CREATED: ConvertUtils.timestamp_to_human(record.created),
            Column.MODIFIED: ConvertUtils.timestamp_to_human(record.modified),
            Column.ACCESSED: ConvertUtils.timestamp_to_human(record.accessed),
        })

    @staticmethod
    def _format_field(column: Column, value: str) -> str:
        if column in _ESCAPED_COLUMNS:
            value = encode_control_characters(value)
        if column in _QUOTED_COLUMNS:
            value = f"{QUOTE}{value}{QUOTE}"
        return value

    def _write_fields(self, values: Dict[Column, str]) -> None:
        line = "".join(
            self._format_field(column, values[column]) + FIELD_SEPARATOR
            for column in self._columns
        )
        self._writer.write(line + "\n")
        self._writes += 1

        # Flush the output buffer after every tenth line
        if self._writes % FLUSH_INTERVAL == 0:
            self._writer.flush()
