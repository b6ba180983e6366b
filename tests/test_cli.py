import pytest
import json
from rrparse import cli


@pytest.fixture(autouse=True)
def no_default_config(monkeypatch):
    monkeypatch.setattr(cli, "find_default_config", lambda: None)


class TestMain:
    def test_single_rule_with_occurrences(self, capsys):
        cli.main(["--dtstart", "20250101T090000Z", "-n", "2", "FREQ=DAILY;COUNT=3"])

        out = capsys.readouterr().out
        assert "Rule:" in out
        assert "freq: DAILY" in out
        assert "count: 3" in out
        assert "2025-01-01T09:00:00+00:00" in out
        assert "2025-01-02T09:00:00+00:00" in out
        assert "2025-01-03T09:00:00+00:00" not in out

    def test_document_from_file(self, tmp_path, capsys, sample_document):
        doc = tmp_path / "schedule.txt"
        doc.write_text(sample_document)

        cli.main(["--unfold", "-f", str(doc)])

        out = capsys.readouterr().out
        assert "RuleSet:" in out
        assert "byweekday: MO,WE,FR" in out
        assert "exclusion date: 2020-01-03T00:00:00+00:00" in out

    def test_multiple_arguments_are_lines(self, capsys):
        cli.main(["--unfold", "RRULE:FREQ=DAILY", "RRULE:FREQ=WEEKLY"])

        out = capsys.readouterr().out
        assert "rule 1:" in out
        assert "rule 2:" in out

    def test_config_file(self, tmp_path, capsys):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"tzid": "UTC"}))

        cli.main(["-c", str(config_file), "--forceset", "FREQ=DAILY"])
        cli.main(["-c", str(config_file), "FREQ=DAILY"])

        out = capsys.readouterr().out
        assert "RuleSet:" in out
        assert "rule 1:" in out
        assert "tzid: UTC" in out

    def test_parse_error_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main(["FREQ=WEEKLY;BOGUS=1"])

        assert exc.value.code == 1
        assert "Error: unknown parameter 'BOGUS'" in capsys.readouterr().err

    def test_missing_config_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main(["-c", "/nonexistent/rrparse.json", "FREQ=DAILY"])

        assert exc.value.code == 1
        assert "Config file not found" in capsys.readouterr().err

    def test_bad_dtstart_exits(self, capsys):
        with pytest.raises(SystemExit):
            cli.main(["--dtstart", "soon", "FREQ=DAILY"])

        assert "Invalid date format" in capsys.readouterr().err

    def test_reads_stdin(self, monkeypatch, capsys):
        import io

        monkeypatch.setattr("sys.stdin", io.StringIO("FREQ=MONTHLY;BYMONTHDAY=1\n"))

        cli.main([])

        out = capsys.readouterr().out
        assert "freq: MONTHLY" in out
        assert "bymonthday: 1" in out
