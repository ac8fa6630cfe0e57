"""Tests for the command line interface."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from kubereport import cli
from kubereport.constants.enums import TemplateKind
from kubereport.report.errors import ScopeNotFoundError


@pytest.fixture(autouse=True)
def quiet_logging() -> Iterator[MagicMock]:
    with patch.object(cli, "configure_logging") as configure:
        yield configure


class TestParser:
    """Tests for build_parser."""

    def test_generate_arguments(self) -> None:
        args = cli.build_parser().parse_args(
            ["--api-port", "8443", "--secure", "generate", "team-a", "--token", "abc"]
        )
        assert args.command == "generate"
        assert args.namespace == "team-a"
        assert args.token == "abc"
        assert args.api_port == 8443
        assert args.secure is True

    def test_unset_flags_are_none(self) -> None:
        args = cli.build_parser().parse_args(["test"])
        assert args.report_dir is None
        assert args.secure is None
        assert args.font_path is None

    def test_font_path_reaches_settings(self) -> None:
        args = cli.build_parser().parse_args(["--font-path", "/fonts/NotoSans.ttf", "test"])
        assert cli._settings_from_args(args).font_path == "/fonts/NotoSans.ttf"

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])


class TestMain:
    """Tests for main."""

    def test_kinds(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["kinds"]) == 0
        assert "healthcheck" in capsys.readouterr().out

    def test_templates(self, tmp_path: Path) -> None:
        assert cli.main(["templates", str(tmp_path / "templates")]) == 0
        for kind in TemplateKind:
            assert (tmp_path / "templates" / kind.file_name).is_file()

    def test_test_report(self, tmp_path: Path, template_dir: Path) -> None:
        report_dir = tmp_path / "reports"

        code = cli.main(
            ["--report-dir", str(report_dir), "--template-dir", str(template_dir), "test"]
        )

        assert code == 0
        assert len(list(report_dir.glob("Test-SAMPLE-NAMESPACE-*.pdf"))) == 1

    def test_verbose_flag(self, quiet_logging: MagicMock) -> None:
        cli.main(["-v", "kinds"])
        quiet_logging.assert_called_once_with(True)

    def test_generate_passes_token_from_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(cli.TOKEN_ENV_VAR, "env-token")
        with patch.object(cli, "ReportGenerator") as generator_cls:
            generator_cls.return_value.generate_health_check_report.return_value = "report.pdf"
            assert cli.main(["generate", "default"]) == 0

        generator_cls.return_value.generate_health_check_report.assert_called_once_with(
            "default", bearer_token="env-token"
        )

    def test_report_error_exit_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch.object(cli, "ReportGenerator") as generator_cls:
            generator_cls.return_value.generate_health_check_report.side_effect = (
                ScopeNotFoundError("missing")
            )
            assert cli.main(["generate", "missing"]) == 1
        assert "namespace 'missing' not found" in capsys.readouterr().out

    def test_config_error_exit_code(self, tmp_path: Path) -> None:
        assert cli.main(["--config", str(tmp_path / "missing.yaml"), "test"]) == 1
