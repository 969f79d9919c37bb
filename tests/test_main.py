"""
Tests for the command-line entry point

Run with: python -m pytest tests/test_main.py -v
"""

import pytest

import main
from twn_weather.orchestrator import STATUS_FAILED, STATUS_NOT_FOUND, STATUS_OK, TaskOutcome


@pytest.fixture
def recorded_runs(monkeypatch):
    runs = []

    def fake_run_queries(queries, **kwargs):
        runs.append((queries, kwargs))
        return [TaskOutcome(q, STATUS_OK) for q in queries]

    monkeypatch.setattr(main, "run_queries", fake_run_queries)
    return runs


class TestParseArgs:

    def test_defaults(self):
        args = main.parse_args([])
        assert args.cities is None
        assert args.delimiter == ";"
        assert args.plain is False
        assert args.workers is None
        assert args.include_airports is False

    def test_options(self):
        args = main.parse_args(["Atlanta,Chicago", "--delimiter", ",", "--plain", "--workers", "2"])
        assert args.cities == "Atlanta,Chicago"
        assert args.delimiter == ","
        assert args.plain is True
        assert args.workers == 2

    @pytest.mark.parametrize("workers", ["0", "-1", "many"])
    def test_workers_must_be_positive(self, workers, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main.parse_args(["Atlanta", "--workers", workers])

        assert exc_info.value.code == 2
        assert "--workers" in capsys.readouterr().err

    def test_positive_int(self):
        assert main.positive_int("3") == 3


class TestMain:

    def test_empty_input_exits_before_pool(self, recorded_runs, capsys):
        exit_code = main.main(main.parse_args(["   "]))

        assert exit_code == 1
        assert recorded_runs == []
        assert "Query cannot be empty." in capsys.readouterr().out

    def test_prompted_input(self, recorded_runs, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda prompt: "Atlanta ; new york ")

        exit_code = main.main(main.parse_args([]))

        assert exit_code == 0
        assert recorded_runs[0][0] == ["Atlanta", "new york"]

    def test_comma_delimiter_and_workers(self, recorded_runs):
        main.main(main.parse_args(["Atlanta,Chicago", "--delimiter", ",", "--workers", "2"]))

        queries, kwargs = recorded_runs[0]
        assert queries == ["Atlanta", "Chicago"]
        assert kwargs["max_workers"] == 2
        assert kwargs["resolver"].reject_airports is True

    def test_include_airports(self, recorded_runs):
        main.main(main.parse_args(["Denver", "--include-airports"]))
        assert recorded_runs[0][1]["resolver"].reject_airports is False

    def test_failed_lookup_exit_code(self, monkeypatch, capsys):
        monkeypatch.setattr(main, "run_queries", lambda queries, **kwargs: [
            TaskOutcome("Atlanta", STATUS_OK),
            TaskOutcome("Chicago", STATUS_FAILED, error="boom"),
        ])

        assert main.main(main.parse_args(["Atlanta;Chicago"])) == 1
        assert "1 failed: Chicago" in capsys.readouterr().out

    def test_not_found_is_success(self, monkeypatch):
        monkeypatch.setattr(main, "run_queries", lambda queries, **kwargs: [
            TaskOutcome("Atlantis", STATUS_NOT_FOUND),
        ])
        assert main.main(main.parse_args(["Atlantis"])) == 0
