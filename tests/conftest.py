import pytest


SAMPLE_RECORDS = [
    "0,9 -> 5,9",
    "8,0 -> 0,8",
    "9,4 -> 3,4",
    "2,2 -> 2,1",
    "7,0 -> 7,4",
    "6,4 -> 2,0",
    "0,9 -> 2,9",
    "3,4 -> 1,4",
    "0,0 -> 8,8",
    "5,5 -> 8,2",
]


@pytest.fixture
def sample_records():
    return list(SAMPLE_RECORDS)


@pytest.fixture
def sample_file(tmp_path, sample_records):
    path = tmp_path / "input.txt"
    # trailing blank lines are common in puzzle inputs
    path.write_text("\n".join(sample_records) + "\n\n", encoding="utf-8")
    return path
