import sys
from typing import List

import config
from models.csv_model import CSVData


class ConsoleView:
    """
    Console reporter. Writes to stdout/stderr only; never validates the table.
    """

    def __init__(self, out=None, err=None, column_width: int = None):
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.column_width = column_width or config.COLUMN_WIDTH

    def render_table(self, table: CSVData) -> List[str]:
        lines = []
        for row in table.rows:
            lines.append("".join(f"{cell:{self.column_width}} " for cell in row))
        return lines

    def pretty_print(self, table: CSVData):
        if table.is_empty:
            print("The CSV is empty!", file=self.out)
            return
        print("Pretty CSV display:", file=self.out)
        for line in self.render_table(table):
            print(line, file=self.out)

    def show_line(self, line_number: int, line: str):
        print(f"Line {line_number}: {line}", file=self.out)

    def show_column(self, col_number: int, column: List[str]):
        print(f"Column {col_number}: {column}", file=self.out)

    def show_sum(self, col_number: int, total: int):
        print(f"Sum of the column {col_number}: {total}", file=self.out)

    def show_error(self, error: Exception):
        print(f"Error: {type(error).__name__}: {error}", file=self.err)
