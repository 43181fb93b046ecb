"""
Tests for escp_label/cli.py

Covers token parsing, option plumbing and the exit status contract of main().
"""

import json
import logging
from pathlib import Path
from typing import Iterator

import pytest

from escp_label.cli import build_job, main, split_parameters
from escp_label.model import InvalidArgumentError, JobOptions

TEXT_TOKEN = "text:Hello,World,24,HELSINKI,true,false,single,center,wide"
BARCODE_TOKEN = "barcode:123456789,CODE128,70,MEDIUM,2:1,true,center"
TEXT_FRAGMENT = bytes.fromhex(
    "1B534F48 1B583234 1B6B03 1B45 1B35 1B2D31 1B6131 1B2031 48656C6C6F 09 576F726C64"
)


@pytest.fixture(autouse=True)
def isolated(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Run from an empty directory and restore the package logger afterwards."""
    monkeypatch.chdir(tmp_path)
    package_logger = logging.getLogger("escp_label")
    saved_level = package_logger.level
    saved_handler_levels = [(h, h.level) for h in package_logger.handlers]
    yield
    package_logger.setLevel(saved_level)
    for handler, level in saved_handler_levels:
        handler.setLevel(level)


class TestSplitParameters:
    def test_plain(self) -> None:
        assert split_parameters("a,b,c") == ["a", "b", "c"]

    def test_quotes_keep_commas(self) -> None:
        assert split_parameters('"Hello, you",World, 24') == ["Hello, you", "World", "24"]

    def test_trims_whitespace_and_single_quotes(self) -> None:
        assert split_parameters(" 'a' , b ") == ["a", "b"]

    def test_trailing_comma(self) -> None:
        assert split_parameters("a,b,") == ["a", "b"]


class TestBuildJob:
    def test_text_and_barcode(self) -> None:
        job = build_job([TEXT_TOKEN, BARCODE_TOKEN], JobOptions())
        assert job.startswith(b"\x1b@" + TEXT_FRAGMENT + b"\x1bia")
        assert job.endswith(b"B123456789\\\\\x0c")

    def test_spacing_is_optional(self) -> None:
        job = build_job(["text:A,B,10,brougham,no,no,none,left"], JobOptions())
        assert b"\x1b 0A\tB" in job

    def test_carriage_return(self) -> None:
        job = build_job([TEXT_TOKEN], JobOptions(), carriage_return=True)
        assert job == b"\x1b@" + TEXT_FRAGMENT + b"\r\x0c"

    @pytest.mark.parametrize(
        "token, field",
        [
            ("label:hello", "token"),
            ("text:Hello,World,24", "text"),
            ("barcode:123,CODE128", "barcode"),
            ("text:Hello,World,big,HELSINKI,true,false,single,center", "font_size"),
            ("text:Hello,World,24,HELSINKI,maybe,false,single,center", "bold"),
            ("barcode:123,QR,70,MEDIUM,2:1,true,center", "symbology"),
            ("barcode:123,CODE39,150,MEDIUM,2:1,true,center", "height"),
        ],
    )
    def test_invalid_tokens(self, token: str, field: str) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            build_job([token], JobOptions())
        assert exc_info.value.field == field


class TestMain:
    def test_writes_job(self, tmp_path: Path) -> None:
        output = tmp_path / "label.prn"
        status = main([str(output), TEXT_TOKEN, "--carriage-return", "--cut-paper"])
        assert status == 0
        assert output.read_bytes() == b"\x1b@" + TEXT_FRAGMENT + b"\r\x1biC\x0c"

    def test_options_intermixed_with_tokens(self, tmp_path: Path) -> None:
        output = tmp_path / "label.prn"
        status = main([str(output), "--landscape", BARCODE_TOKEN, "--left-margin", "5"])
        assert status == 0
        assert output.read_bytes().startswith(b"\x1b@\x1biL\x1bl\x05\x1bia")

    def test_invalid_token_writes_nothing(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        output = tmp_path / "label.prn"
        status = main([str(output), "bogus:1,2"])
        assert status == 2
        assert not output.exists()
        assert "escp-label: error:" in capsys.readouterr().err

    def test_out_of_range_option(self, tmp_path: Path) -> None:
        output = tmp_path / "label.prn"
        assert main([str(output), TEXT_TOKEN, "--page-length", "300"]) == 2
        assert not output.exists()

    def test_page_format_needs_both_values(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        output = tmp_path / "label.prn"
        with caplog.at_level(logging.WARNING, logger="escp_label"):
            assert main([str(output), "--page-format-width", "62"]) == 0
        assert output.read_bytes() == b"\x1b@\x0c"
        assert "both width and height" in caplog.text

    def test_page_format(self, tmp_path: Path) -> None:
        output = tmp_path / "label.prn"
        argv = [str(output), "--page-format-width", "62", "--page-format-height", "100"]
        assert main(argv) == 0
        assert output.read_bytes() == b"\x1b@\x1b(c\x3e\x64\x0c"

    def test_config_supplies_defaults(self, tmp_path: Path) -> None:
        config_path = tmp_path / "settings.json"
        config_path.write_text(json.dumps({"cut_paper": True, "landscape": True}), "utf-8")
        output = tmp_path / "label.prn"

        assert main([str(output), "--config", str(config_path)]) == 0
        assert output.read_bytes() == b"\x1b@\x1biL\x1biC\x0c"

    def test_config_json_in_working_directory(self, tmp_path: Path) -> None:
        (tmp_path / "config.json").write_text(json.dumps({"carriage_return": True}), "utf-8")
        output = tmp_path / "label.prn"

        assert main([str(output), TEXT_TOKEN]) == 0
        assert output.read_bytes().endswith(b"World\r\x0c")

    def test_unwritable_output(self, tmp_path: Path) -> None:
        assert main([str(tmp_path), TEXT_TOKEN]) == 1

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "escp-label" in capsys.readouterr().out


class TestConfigValues:
    """Config files with values of the wrong JSON type."""

    @pytest.mark.parametrize(
        "config",
        [
            {"log_level": 10},
            {"text_encoding": 5},
            {"cut_paper": "yes"},
            {"carriage_return": 1},
        ],
    )
    def test_mistyped_value_falls_back_to_default(
        self, tmp_path: Path, config: dict, caplog: pytest.LogCaptureFixture
    ) -> None:
        (tmp_path / "config.json").write_text(json.dumps(config), "utf-8")
        output = tmp_path / "label.prn"

        with caplog.at_level(logging.WARNING, logger="escp_label"):
            status = main([str(output), "text:A,B,10,brougham,no,no,none,left"])

        assert status == 0
        assert output.read_bytes().endswith(b"A\tB\x0c")
        assert next(iter(config)) in caplog.text

    def test_unknown_codec_is_invalid_argument(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (tmp_path / "config.json").write_text(json.dumps({"text_encoding": "klingon"}), "utf-8")
        output = tmp_path / "label.prn"

        assert main([str(output), TEXT_TOKEN]) == 2
        assert not output.exists()
        assert "klingon" in capsys.readouterr().err


def test_verbose_logs_hex_dump(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    output = tmp_path / "label.prn"
    with caplog.at_level(logging.DEBUG, logger="escp_label"):
        assert main([str(output), "--verbose"]) == 0
    assert "Hex dump: 1B 40 0C" in caplog.text
