from typing import List

import pandas as pd


class CSVData:
    """
    Represents the parsed CSV in memory:
      - rows: list of lists of cleaned cells, in source line order
      - row 0 is the header by convention; rows may differ in length
    """
    def __init__(self, rows=None):
        self.rows: List[List[str]] = rows or []

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        # Shortest row wins: any wider index fails on at least one row
        if not self.rows:
            return 0
        return min(len(row) for row in self.rows)

    @property
    def header(self) -> List[str]:
        return list(self.rows[0]) if self.rows else []

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def to_dataframe(self) -> pd.DataFrame:
        if not self.rows:
            return pd.DataFrame()
        columns = self.header
        width = len(columns)
        data = []
        for row in self.rows[1:]:
            safe = []
            for i in range(width):
                if i < len(row): safe.append(row[i])
                else: safe.append(None)
            data.append(safe)
        return pd.DataFrame(data, columns=columns)

    def __eq__(self, other):
        if not isinstance(other, CSVData):
            return NotImplemented
        return self.rows == other.rows

    def __repr__(self):
        return f"CSVData(rows={self.rows!r})"
