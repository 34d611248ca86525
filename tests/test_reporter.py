from fair_billing.models import UserResult
from fair_billing.reporter import HEADER, SEPARATOR, format_report, format_seconds, select_rows

RESULTS = [UserResult("ALICE99", 4, 240), UserResult("CHARLIE", 3, 37)]


def test_format_seconds_hh_mm_ss() -> None:
    assert format_seconds(0) == "00:00:00"
    assert format_seconds(3661) == "01:01:01"


def test_report_has_fixed_header_and_rows_in_order() -> None:
    content = format_report(RESULTS)

    assert content.splitlines() == [
        "UserName  Sessions  TotalTimeInSeconds",
        "--------------------------------------",
        "ALICE99   4         240",
        "CHARLIE   3         37",
    ]


def test_empty_report_keeps_header() -> None:
    assert format_report([]) == f"{HEADER}\n{SEPARATOR}"


def test_hms_report_rows() -> None:
    content = format_report(RESULTS, hms=True)

    assert content.splitlines()[2] == "ALICE99   4         00:04:00"


def test_select_rows_filters_by_user() -> None:
    assert select_rows(RESULTS, "CHARLIE") == [RESULTS[1]]
    assert select_rows(RESULTS, "NOBODY") == []
    assert select_rows(RESULTS) == RESULTS


def test_negative_totals_keep_their_sign() -> None:
    assert format_seconds(-20) == "-00:00:20"
    assert format_report([UserResult("A", 1, -20)], hms=True).splitlines()[2] == "A   1         -00:00:20"
    assert format_report([UserResult("A", 1, -20)]).splitlines()[2] == "A   1         -20"
