from pathlib import Path

import pytest

from services.csv_service import CSVService

BIOSTATS_PATH = Path(__file__).resolve().parent.parent / "biostats1.csv"

BIOSTATS_ROWS = [
    ["Name", "Sex", "Age", "Heightin", "Weightlbs"],
    ["Alex", "M", "41", "74", "170"],
    ["Bert", "M", "42", "68", "166"],
    ["Carl", "M", "32", "70", "155"],
    ["Dave", "M", "39", "72", "167"],
    ["Elly", "F", "30", "66", "124"],
    ["Fran", "F", "33", "66", "115"],
    ["Gwen", "F", "26", "64", "121"],
    ["Hank", "M", "30", "71", "158"],
    ["Ivan", "M", "53", "72", "175"],
    ["Jake", "M", "32", "69", "143"],
    ["Kate", "F", "47", "69", "139"],
    ["Luke", "M", "34", "72", "163"],
    ["Myra", "F", "23", "62", "98"],
    ["Neil", "M", "36", "75", "160"],
    ["Omar", "M", "38", "70", "145"],
    ["Page", "F", "31", "67", "135"],
    ["Quin", "M", "29", "71", "176"],
    ["Ruth", "F", "28", "65", "131"],
]


@pytest.fixture
def biostats_path():
    return BIOSTATS_PATH


@pytest.fixture
def biostats_rows():
    return [list(row) for row in BIOSTATS_ROWS]


@pytest.fixture
def biostats_text():
    return BIOSTATS_PATH.read_text(encoding="utf-8")


@pytest.fixture
def biostats_table(biostats_text):
    return CSVService.parse(biostats_text)


@pytest.fixture
def ragged_table():
    return CSVService.parse("id,name,score\n1,ann\n2,bob,7\n")
