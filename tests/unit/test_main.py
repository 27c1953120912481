"""Tests for the command-line entry point."""

import io
from unittest.mock import AsyncMock, patch

import pytest

from perspective.analysis.exceptions import AnalysisNetworkError
from perspective.main import main


@pytest.fixture(autouse=True)
def _example_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PERSPECTIVE_PROVIDER", "example")
    monkeypatch.setenv("PERSPECTIVE_MODELS", '["TOXICITY", "SPAM"]')


class TestMain:
    def test_passes_clean_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["hello", "world"]) == 0
        out = capsys.readouterr().out
        assert "Body: REDACTED" in out
        assert "TOXICITY: 0.0" in out
        assert "SPAM: 0.0" in out
        assert "Passed" in out
        assert "hello world" not in out

    def test_prints_body_when_redaction_disabled(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("PERSPECTIVE_REDACT_BODY", "false")
        main(["hello", "world"])
        assert "Body: hello world" in capsys.readouterr().out

    def test_filtered_text_exits_one(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("PERSPECTIVE_THRESHOLDS", '{"TOXICITY": 0.0, "SPAM": 0.0}')
        assert main(["anything"]) == 1
        assert "Filtered: SPAM" in capsys.readouterr().out

    def test_reads_stdin_without_args(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("PERSPECTIVE_REDACT_BODY", "false")
        monkeypatch.setattr("sys.stdin", io.StringIO("from stdin"))
        assert main([]) == 0
        assert "Body: from stdin" in capsys.readouterr().out

    def test_analysis_failure_exits_two(self) -> None:
        with patch(
            "perspective.analysis.requester.Requester.analyze",
            new=AsyncMock(side_effect=AnalysisNetworkError("down")),
        ):
            assert main(["text"]) == 2

    def test_unknown_model_name_exits_two(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PERSPECTIVE_MODELS", '["PROFANITY"]')
        assert main(["text"]) == 2

    def test_unknown_threshold_model_exits_two(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PERSPECTIVE_THRESHOLDS", '{"PROFANITY": 0.5}')
        assert main(["text"]) == 2

    def test_missing_api_key_exits_two(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PERSPECTIVE_PROVIDER", "perspective")
        monkeypatch.setenv("PERSPECTIVE_API_KEY", "")
        assert main(["text"]) == 2
