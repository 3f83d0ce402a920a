# tests/test_cli.py
"""
Tests for report rendering and the ``satrange`` command line.
"""

import json
import logging

import pytest

from satrange.harness import ClassificationCounters
from satrange.main import EXIT_INFRA, EXIT_OK, main
from satrange.report import format_json, format_labeled, format_plain

COUNTERS = ClassificationCounters(
    total=36, equal=11, decomposed_better=25, decomposed_worse=0, incomparable=0
)


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger = logging.getLogger("satrange")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


class TestReport:

    def test_plain_is_five_lines_in_order(self):
        assert format_plain(COUNTERS) == "36\n11\n25\n0\n0\n"

    def test_labeled(self):
        lines = format_labeled(COUNTERS).splitlines()
        assert lines == [
            "Num abstract value pairs tested: 36",
            "Num with equal result: 11",
            "Num decomposed better: 25",
            "Num decomposed worse: 0",
            "Num incomparable results: 0",
        ]

    def test_json(self):
        assert json.loads(format_json(COUNTERS)) == COUNTERS.as_dict()


class TestMain:

    def test_default_pair_width_two(self, capsys):
        assert main(["--width", "2"]) == EXIT_OK
        assert capsys.readouterr().out == "36\n36\n0\n0\n0\n"

    def test_exclusive_candidate_labeled(self, capsys):
        code = main(["-w", "2", "--candidate", "decomposed-exclusive", "-f", "labeled"])
        assert code == EXIT_OK
        out = capsys.readouterr().out
        assert "Num decomposed better: 25" in out

    def test_json_to_file(self, tmp_path):
        dest = tmp_path / "out" / "counters.json"
        assert main(["-w", "2", "--format", "json", "--output", str(dest)]) == EXIT_OK
        assert json.loads(dest.read_text(encoding="utf-8"))["total"] == 36

    def test_parallel_workers(self, capsys):
        assert main(["-w", "3", "-j", "2"]) == EXIT_OK
        assert capsys.readouterr().out == "784\n784\n0\n0\n0\n"

    @pytest.mark.parametrize("width", ["0", "33"])
    def test_invalid_width_exit_code(self, width, capsys):
        assert main(["--width", width]) == EXIT_INFRA
        err = capsys.readouterr().err
        assert "SATR-2001" in err

    def test_unknown_algorithm_is_usage_error(self):
        with pytest.raises(SystemExit) as info:
            main(["--candidate", "llvm"])
        assert info.value.code == 2

    def test_verbose_logs_progress(self, capsys):
        assert main(["-w", "2", "-v"]) == EXIT_OK
        err = capsys.readouterr().err
        assert "Classified 36 pairs" in err

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as info:
            main(["--version"])
        assert info.value.code == 0
        assert "satrange" in capsys.readouterr().out


class TestPositionalWidth:

    def test_positional_width(self, capsys):
        assert main(["2"]) == EXIT_OK
        assert capsys.readouterr().out == "36\n36\n0\n0\n0\n"

    def test_positional_with_options(self, capsys):
        assert main(["2", "--candidate", "decomposed-exclusive"]) == EXIT_OK
        assert capsys.readouterr().out == "36\n11\n25\n0\n0\n"

    def test_matching_flag_and_positional(self, capsys):
        assert main(["2", "--width", "2"]) == EXIT_OK
        assert capsys.readouterr().out.splitlines()[0] == "36"

    def test_conflicting_widths_is_usage_error(self):
        with pytest.raises(SystemExit) as info:
            main(["2", "--width", "3"])
        assert info.value.code == 2

    def test_invalid_positional_width(self, capsys):
        assert main(["0"]) == EXIT_INFRA
        assert "SATR-2001" in capsys.readouterr().err


class TestOutputErrors:

    def test_directory_as_output(self, tmp_path, capsys):
        assert main(["-w", "1", "--output", str(tmp_path)]) == EXIT_INFRA
        assert "SATR-2003" in capsys.readouterr().err

    def test_parent_is_a_file(self, tmp_path, capsys):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        dest = blocker / "counters.txt"
        assert main(["-w", "1", "--output", str(dest)]) == EXIT_INFRA
        assert "cannot open output" in capsys.readouterr().err

    def test_dash_writes_stdout(self, capsys):
        assert main(["-w", "1", "--output", "-"]) == EXIT_OK
        assert capsys.readouterr().out == "1\n1\n0\n0\n0\n"
