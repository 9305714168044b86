import logging
import re
from typing import List

import config
from models.csv_model import CSVData
from services.csv_service import CSVService, CSVServiceError

logger = logging.getLogger(__name__)

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class QueryIndexError(CSVServiceError, IndexError):
    kind = "index"

    def __init__(self, index: int, size: int):
        super().__init__(f"{self.kind.capitalize()} {index} is out of range (size {size})")
        self.index = index
        self.size = size


class LineIndexError(QueryIndexError):
    kind = "line"


class ColumnIndexError(QueryIndexError):
    kind = "column"

    def __init__(self, index: int, size: int, line_number: int):
        super().__init__(index, size)
        self.line_number = line_number


class NumericParseError(CSVServiceError, ValueError):
    def __init__(self, value: str):
        super().__init__(f"Invalid 32-bit integer: {value!r}")
        self.value = value


def parse_int32(value: str) -> int:
    """Parse a base-10 signed 32-bit integer, rejecting anything else."""
    if not _INT_PATTERN.fullmatch(value):
        raise NumericParseError(value)
    sign = "-" if value[0] == "-" else ""
    digits = value.lstrip("+-").lstrip("0") or "0"
    # More than 10 significant digits is out of range whatever they are
    if len(digits) > 10:
        raise NumericParseError(value)
    number = int(sign + digits)
    if number < INT32_MIN or number > INT32_MAX:
        raise NumericParseError(value)
    return number


def wrap_int32(number: int) -> int:
    return (number - INT32_MIN) % (2 ** 32) + INT32_MIN


class QueryService:
    """
    Read-only views over a parsed table. Row 0 counts as a line for
    get_line/get_col and is always skipped by sum_col.
    """

    @staticmethod
    def get_line(table: CSVData, line_number: int) -> str:
        if line_number < 0 or line_number >= table.row_count:
            raise LineIndexError(line_number, table.row_count)
        return config.LINE_SEPARATOR.join(table.rows[line_number])

    @staticmethod
    def get_col(table: CSVData, col_number: int) -> List[str]:
        column = []
        for i, row in enumerate(table.rows):
            if col_number < 0 or col_number >= len(row):
                raise ColumnIndexError(col_number, len(row), i)
            column.append(row[col_number])
        return column

    @staticmethod
    def sum_col(table: CSVData, col_number: int) -> int:
        column = QueryService.get_col(table, col_number)
        total = 0
        for value in column[1:]:
            total += parse_int32(value)
        wrapped = wrap_int32(total)
        if wrapped != total:
            logger.warning("Sum of column %d overflowed 32 bits: %d wrapped to %d", col_number, total, wrapped)
        return wrapped

    # --- RAW TEXT VARIANTS ---
    @staticmethod
    def parse_and_get_line(text: str, line_number: int) -> str:
        return QueryService.get_line(CSVService.parse(text), line_number)

    @staticmethod
    def parse_and_get_col(text: str, col_number: int) -> List[str]:
        return QueryService.get_col(CSVService.parse(text), col_number)

    @staticmethod
    def parse_and_sum_col(text: str, col_number: int) -> int:
        return QueryService.sum_col(CSVService.parse(text), col_number)
