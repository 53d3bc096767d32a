# tests/test_frequency.py
import pytest

from wordpredictor.errors import DataLoadError
from wordpredictor.frequency import FrequencyTable


def write(path, lines):
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def files(tmp_path):
    counts = write(tmp_path / "term_freq_vector.txt", ["10", "50", "3"])
    names = write(tmp_path / "term_freq_names.txt", ["for", "the", "last"])
    return counts, names


def test_load_joins_files_by_position(files):
    table = FrequencyTable.load(*files)
    assert dict(table) == {"for": 10, "the": 50, "last": 3}
    assert table["the"] == 50
    assert table.get("unseen", 1) == 1
    assert "for" in table
    assert len(table) == 3
    assert table.stats() == {"terms": 3, "total_count": 63}


def test_length_mismatch_fails(files):
    counts, names = files
    write(names, ["for", "the"])
    with pytest.raises(DataLoadError, match="mismatch"):
        FrequencyTable.load(counts, names)


def test_missing_file_fails(tmp_path, files):
    counts, _ = files
    with pytest.raises(DataLoadError) as exc:
        FrequencyTable.load(counts, tmp_path / "nope.txt")
    assert exc.value.path.endswith("nope.txt")


def test_empty_file_fails(files):
    counts, names = files
    counts.write_text("\n\n", encoding="utf-8")
    with pytest.raises(DataLoadError, match="empty"):
        FrequencyTable.load(counts, names)


@pytest.mark.parametrize("bad", ["ten", "-4", "2.5", "-3.0", "nan", "inf"])
def test_invalid_counts_fail(files, bad):
    counts, names = files
    write(counts, ["10", bad, "3"])
    with pytest.raises(DataLoadError, match="Invalid count"):
        FrequencyTable.load(counts, names)


def test_integral_float_counts_are_accepted(files):
    counts, names = files
    write(counts, ["10.0", "5e1", "3"])
    assert FrequencyTable.load(counts, names)["the"] == 50


def test_first_duplicate_name_wins(files):
    counts, names = files
    write(names, ["for", "the", "for"])
    assert FrequencyTable.load(counts, names)["for"] == 10


def test_large_counts_keep_full_precision(files):
    counts, names = files
    write(counts, ["10", "9007199254740993", "3"])
    assert FrequencyTable.load(counts, names)["the"] == 9007199254740993
