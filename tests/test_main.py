"""Unit tests for the command-line entry point.

Tests the main() function including:
- CLI argument handling
- Configuration priority (CLI > env > config)
- Job selection (active only, inactive included, good fits only)
- Report output in text and JSON
- Exit code handling
"""

import json
from unittest.mock import patch

import pytest

from jobfit.config.environment import EnvironmentConfig
from jobfit.config.models import AppConfig, LoggingConfig, RankingConfig
from jobfit.main import EXIT_ERROR, EXIT_OK, EXIT_UNKNOWN_CANDIDATE, load_runtime_config, main


@pytest.fixture(autouse=True)
def isolated_run(tmp_path, monkeypatch, restore_root_logger):
    """Run from an empty directory with .env loading disabled."""
    monkeypatch.chdir(tmp_path)
    with patch("jobfit.main.load_dotenv"):
        yield


def run_json(capsys, *argv):
    code = main([*argv, "--format", "json"])
    out = capsys.readouterr().out
    return code, (json.loads(out) if code == EXIT_OK else None)


class TestLoadRuntimeConfig:
    """Test suite for load_runtime_config helper."""

    def _patched(self, app_config, env_config):
        return patch("jobfit.main.load_config", return_value=(app_config, env_config))

    def test_cli_log_level_wins(self):
        app_config = AppConfig(logging=LoggingConfig(level="ERROR"))
        env_config = EnvironmentConfig(log_level="WARNING")

        with self._patched(app_config, env_config):
            _, env = load_runtime_config(None, "DEBUG")

        assert env.log_level == "DEBUG"

    def test_env_log_level_beats_config(self):
        app_config = AppConfig(logging=LoggingConfig(level="ERROR"))
        env_config = EnvironmentConfig(log_level="WARNING")

        with self._patched(app_config, env_config):
            _, env = load_runtime_config(None, None)

        assert env.log_level == "WARNING"

    def test_config_log_level_used_last(self):
        app_config = AppConfig(logging=LoggingConfig(level="ERROR"))

        with self._patched(app_config, EnvironmentConfig()):
            _, env = load_runtime_config(None, None)

        assert env.log_level == "ERROR"

    def test_default_log_level(self):
        with self._patched(AppConfig(), EnvironmentConfig()):
            _, env = load_runtime_config(None, None)

        assert env.log_level == "INFO"

    def test_env_current_year_beats_config(self):
        app_config = AppConfig(ranking=RankingConfig(current_year=2020))

        with self._patched(app_config, EnvironmentConfig(current_year=2023)):
            _, env = load_runtime_config(None, None)

        assert env.current_year == 2023

    def test_config_current_year_used(self):
        app_config = AppConfig(ranking=RankingConfig(current_year=2020))

        with self._patched(app_config, EnvironmentConfig()):
            _, env = load_runtime_config(None, None)

        assert env.current_year == 2020


class TestMainReports:
    """Test report output from main()."""

    def test_text_report(self, dataset_yaml, capsys):
        code = main(["--data", str(dataset_yaml)])

        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert "Candidate: Dewi Lestari (cand-001)" in out
        assert " 1. Frontend Developer [job-001]" in out
        assert "Candidate: Budi Santoso (cand-002)" in out
        assert "job-003" not in out

    def test_json_report(self, dataset_yaml, capsys):
        code, document = run_json(capsys, "--data", str(dataset_yaml))

        assert code == EXIT_OK
        assert [p["candidate_id"] for p in document] == ["cand-001", "cand-002"]
        first = document[0]
        assert [m["job_id"] for m in first["matches"]] == ["job-001", "job-002"]
        assert first["matches"][0]["match_score"] == 73
        assert first["matches"][0]["breakdown"] == {
            "education_score": 100,
            "skills_score": 61,
            "experience_score": 92,
            "training_score": 25,
        }
        assert document[1]["matches"][0]["match_score"] == 10

    def test_logs_go_to_stderr(self, dataset_yaml, capsys):
        main(["--data", str(dataset_yaml), "--format", "json", "--log-level", "INFO"])

        captured = capsys.readouterr()
        json.loads(captured.out)
        assert "run.completed" in captured.err

    def test_single_candidate(self, dataset_yaml, capsys):
        code, document = run_json(capsys, "--data", str(dataset_yaml), "--candidate", "cand-002")

        assert code == EXIT_OK
        assert [p["candidate_id"] for p in document] == ["cand-002"]

    def test_best_only(self, dataset_yaml, capsys):
        code, document = run_json(capsys, "--data", str(dataset_yaml), "--best")

        assert code == EXIT_OK
        assert all(len(p["matches"]) == 1 for p in document)
        assert document[0]["matches"][0]["job_id"] == "job-001"

    def test_top_n(self, dataset_yaml, capsys):
        code, document = run_json(capsys, "--data", str(dataset_yaml), "--top", "1")

        assert code == EXIT_OK
        assert all(len(p["matches"]) == 1 for p in document)
        assert document[0]["job_count"] == 2

    def test_include_inactive_jobs_from_config(self, dataset_yaml, tmp_path, capsys):
        config = tmp_path / "custom.yaml"
        config.write_text("ranking:\n  include_inactive_jobs: true\n")

        code, document = run_json(
            capsys, "--data", str(dataset_yaml), "--config", str(config)
        )

        assert code == EXIT_OK
        assert document[0]["job_count"] == 3

    def test_good_fits_only_from_config(self, dataset_yaml, tmp_path, capsys):
        (tmp_path / "jobfit.yaml").write_text("ranking:\n  good_fits_only: true\n")

        code, document = run_json(capsys, "--data", str(dataset_yaml))

        assert code == EXIT_OK
        assert document[0]["matches"] == []
        assert document[0]["best_match"]["job_id"] == "job-001"

    def test_output_format_from_config(self, dataset_yaml, tmp_path, capsys):
        (tmp_path / "jobfit.yaml").write_text("output:\n  format: json\n")

        code = main(["--data", str(dataset_yaml)])

        assert code == EXIT_OK
        assert isinstance(json.loads(capsys.readouterr().out), list)


class TestMainErrors:
    """Test exit codes for failure modes."""

    def test_unknown_candidate(self, dataset_yaml, capsys):
        code = main(["--data", str(dataset_yaml), "--candidate", "nobody"])

        assert code == EXIT_UNKNOWN_CANDIDATE
        assert "nobody" in capsys.readouterr().err

    def test_missing_dataset(self, tmp_path, capsys):
        code = main(["--data", str(tmp_path / "missing.yaml")])

        assert code == EXIT_ERROR
        assert "not found" in capsys.readouterr().err

    def test_duplicate_ids_in_dataset(self, tmp_path, capsys):
        path = tmp_path / "dupes.yaml"
        path.write_text(
            "candidates:\n  - candidate_id: a\n  - candidate_id: a\njobs: []\n"
        )

        assert main(["--data", str(path)]) == EXIT_ERROR
        assert "Duplicate" in capsys.readouterr().err

    def test_missing_config_file(self, dataset_yaml, tmp_path, capsys):
        code = main(["--data", str(dataset_yaml), "--config", str(tmp_path / "nope.yaml")])

        assert code == EXIT_ERROR
        assert "Configuration Error" in capsys.readouterr().err

    def test_invalid_environment(self, dataset_yaml, monkeypatch, capsys):
        monkeypatch.setenv("JOBFIT_CURRENT_YEAR", "soon")

        assert main(["--data", str(dataset_yaml)]) == EXIT_ERROR
        assert "JOBFIT_CURRENT_YEAR" in capsys.readouterr().err

    def test_top_must_be_positive(self, dataset_yaml, capsys):
        assert main(["--data", str(dataset_yaml), "--top", "0"]) == EXIT_ERROR

    def test_data_is_required(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 2
