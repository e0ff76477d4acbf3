"""Tests for the reference cross-check."""

from datetime import date

import pandas as pd

from shukujitsu.src import verify
from shukujitsu.src.verify import compare_with_reference, summarize


def _reference(rows):
    return pd.DataFrame(rows, columns=["date", "name"])


class TestCompareWithReference:
    def test_all_ok(self):
        ref = _reference([
            (date(2024, 2, 11), "建国記念の日"),
            (date(2024, 2, 12), "休日"),
            (date(2024, 2, 23), "天皇誕生日"),
        ])
        result = compare_with_reference(ref, date(2024, 2, 1), date(2024, 2, 29))
        assert list(result.columns) == ["date", "name_computed", "name_reference", "status"]
        assert result["status"].tolist() == ["ok", "ok", "ok"]

    def test_missing_extra_and_name(self):
        ref = _reference([
            (date(2024, 2, 11), "建国記念日"),   # name differs
            (date(2024, 2, 14), "バレンタイン"),  # engine has no such holiday
            (date(2024, 2, 23), "天皇誕生日"),
        ])
        result = compare_with_reference(ref, date(2024, 2, 1), date(2024, 2, 29))
        by_date = dict(zip(result["date"], result["status"]))
        assert by_date == {
            date(2024, 2, 11): "name",
            date(2024, 2, 12): "extra",
            date(2024, 2, 14): "missing",
            date(2024, 2, 23): "ok",
        }
        assert result["date"].tolist() == sorted(result["date"])

    def test_ceremony_short_names_agree(self):
        ref = _reference([
            (date(1989, 2, 24), "大喪の礼"),
            (date(2019, 5, 1), "休日（祝日扱い）"),
        ])
        result = compare_with_reference(ref, date(1989, 2, 24), date(1989, 2, 24))
        assert result["status"].tolist() == ["ok"]
        result = compare_with_reference(ref, date(2019, 5, 1), date(2019, 5, 1))
        assert result["status"].tolist() == ["ok"]

    def test_reference_outside_range_ignored(self):
        ref = _reference([(date(2023, 1, 1), "元日"), (date(2024, 1, 1), "元日")])
        result = compare_with_reference(ref, date(2024, 1, 1), date(2024, 1, 7))
        assert result["date"].tolist() == [date(2024, 1, 1)]

    def test_summarize(self):
        result = pd.DataFrame({"status": ["ok", "ok", "missing"]})
        assert summarize(result) == {"ok": 2, "name": 0, "missing": 1, "extra": 0}


class TestMain:
    def test_local_reference_exit_codes(self, tmp_path, capsys):
        good = tmp_path / "good.csv"
        good.write_text("date,name\n2024/1/1,元日\n2024/1/8,成人の日\n", encoding="cp932")
        code = verify.main(["--reference", str(good), "--start", "2024-01-01", "--end", "2024-01-31"])
        assert code == 0
        assert "ok: 2" in capsys.readouterr().out

        bad = tmp_path / "bad.csv"
        bad.write_text("date,name\n2024/1/1,元日\n", encoding="cp932")
        code = verify.main(["--reference", str(bad), "--start", "2024-01-01", "--end", "2024-01-31"])
        assert code == 1
        out = capsys.readouterr().out
        assert "extra" in out
        assert "2024-01-08" in out
