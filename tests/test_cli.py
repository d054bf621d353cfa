"""Tests for fitscore.cli -- click commands."""

from __future__ import annotations

import json

from click.testing import CliRunner

from fitscore.cli import main

from tests.conftest import write_jsonl, make_day_entry


class TestScore:
    def test_mock(self):
        result = CliRunner().invoke(main, ["score", "--mock"])
        assert result.exit_code == 0
        assert "70/100 (Good)" in result.output
        assert "Resting Heart Rate" in result.output

    def test_json_output(self):
        result = CliRunner().invoke(main, ["score", "--mock", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["total_score"] == 70

    def test_file_and_output(self, tmp_path):
        metrics = tmp_path / "m.json"
        metrics.write_text(json.dumps({"restingHeartRate": 48, "dailySteps": 13000}))
        out = tmp_path / "out.json"
        result = CliRunner().invoke(main, ["score", str(metrics), "-o", str(out)])
        assert result.exit_code == 0
        # cardio RHR 10 + steps 6
        assert json.loads(out.read_text())["total_score"] == 16

    def test_requires_file_or_mock(self):
        result = CliRunner().invoke(main, ["score"])
        assert result.exit_code != 0
        assert "--mock" in result.output

    def test_bad_file(self, tmp_path):
        metrics = tmp_path / "m.json"
        metrics.write_text("nope")
        result = CliRunner().invoke(main, ["score", str(metrics)])
        assert result.exit_code == 1
        assert "invalid JSON" in result.output


class TestHistory:
    def test_days_and_average(self, tmp_path):
        path = write_jsonl(tmp_path / "h.jsonl", [
            make_day_entry("2026-10-02"),
            {"date": "2026-10-01"},
        ])
        out = tmp_path / "out.json"
        result = CliRunner().invoke(main, ["history", str(path), "-o", str(out)])
        assert result.exit_code == 0
        assert "2026-10-02  100/100" in result.output
        assert "Monthly average over 2 day(s): 50.0/100" in result.output
        payload = json.loads(out.read_text())
        assert [d["date"] for d in payload["days"]] == ["2026-10-02", "2026-10-01"]
        assert payload["monthly_average"]["total_score"] == 50.0

    def test_malformed_history(self, tmp_path):
        path = tmp_path / "h.jsonl"
        path.write_text("{bad\n")
        result = CliRunner().invoke(main, ["history", str(path)])
        assert result.exit_code == 1
        assert "line 1" in result.output

    def test_non_object_sample(self, tmp_path):
        path = write_jsonl(tmp_path / "h.jsonl", [{"date": "2026-10-01", "steps": ["oops"]}])
        result = CliRunner().invoke(main, ["history", str(path)])
        assert result.exit_code == 1
        assert "line 1: health sample must be an object" in result.output

    def test_non_string_timestamp(self, tmp_path):
        entry = make_day_entry()
        entry["workouts"][0]["start"] = 1696147200
        path = write_jsonl(tmp_path / "h.jsonl", [entry])
        result = CliRunner().invoke(main, ["history", str(path)])
        assert result.exit_code == 1
        assert "timestamp must be a string" in result.output

    def test_average_from_daily_based_monthly_average(self, tmp_path, monkeypatch):
        import fitscore.scoring

        calls = []
        original = fitscore.scoring.calculate_daily_based_monthly_average

        def recording(days):
            calls.append(len(days))
            return original(days)

        monkeypatch.setattr(fitscore.scoring, "calculate_daily_based_monthly_average", recording)
        path = write_jsonl(tmp_path / "h.jsonl", [make_day_entry("2026-10-02"), {"date": "2026-10-01"}])
        result = CliRunner().invoke(main, ["history", str(path)])
        assert result.exit_code == 0
        assert calls == [2]


class TestSample:
    def test_sample(self):
        result = CliRunner().invoke(main, ["sample", "--days", "5", "--seed", "7"])
        assert result.exit_code == 0
        assert "over 5 day(s)" in result.output

    def test_verbose_flag(self):
        result = CliRunner().invoke(main, ["-v", "sample", "--days", "2", "--seed", "1"])
        assert result.exit_code == 0
