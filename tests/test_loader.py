import pytest

from fair_billing.errors import FairBillingError, MissingLogFileError
from fair_billing.loader import load_lines


def test_load_lines_reads_all_lines(tmp_path) -> None:
    log_file = tmp_path / "test.log"
    log_file.write_text("14:02:03 ALICE99 Start\r\n14:02:05 CHARLIE End\n", encoding="utf-8")

    assert load_lines(log_file) == ["14:02:03 ALICE99 Start", "14:02:05 CHARLIE End"]


def test_empty_file_is_not_an_error(tmp_path) -> None:
    log_file = tmp_path / "empty.log"
    log_file.write_text("", encoding="utf-8")

    assert load_lines(log_file) == []


def test_missing_file_raises(tmp_path) -> None:
    missing = tmp_path / "nope.log"

    with pytest.raises(MissingLogFileError) as excinfo:
        load_lines(missing)

    assert isinstance(excinfo.value, FairBillingError)
    assert excinfo.value.path == missing
    assert str(missing) in str(excinfo.value)


def test_only_newline_characters_split_lines(tmp_path) -> None:
    log_file = tmp_path / "test.log"
    log_file.write_bytes("14:02:03 ALICE\x0c99 Start\r14:02:04 BOB X End\n".encode("utf-8"))

    assert load_lines(log_file) == ["14:02:03 ALICE\x0c99 Start", "14:02:04 BOB X End"]
