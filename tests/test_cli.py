"""Tests for the snek command-line launcher."""

import json
import logging

import pytest

from snek import cli
from snek.config import GameConfig
from snek.platform import Key


class QuitImmediately:
    """Platform stand-in that quits on the first frame."""

    instances = []

    def __init__(self, config):
        self.config = config
        self.closed = False
        QuitImmediately.instances.append(self)

    def now(self):
        return 0.0

    def key_pressed(self, key):
        return key is Key.QUIT

    def draw_cell(self, x, y, color):
        pass

    def draw_grid_line(self, vertical, index):
        pass

    def draw_text(self, lines):
        pass

    def present_frame(self):
        pass

    def close(self):
        self.closed = True


def _config(argv):
    parser = cli._build_parser()
    return cli._build_config(parser.parse_args(argv), parser)


class TestCLIParser:
    def test_defaults(self):
        args = cli._build_parser().parse_args([])
        assert args.config is None
        assert args.width is None
        assert args.log_level == "INFO"

    def test_defaults_build_default_config(self):
        assert _config([]) == GameConfig()

    def test_flags_override(self):
        cfg = _config([
            "--width", "30", "--height", "15",
            "--polling-ms", "150", "--seed", "9",
        ])
        assert cfg.grid_width == 30
        assert cfg.grid_height == 15
        assert cfg.polling_rate == pytest.approx(0.15)
        assert cfg.seed == 9

    def test_config_file_with_override(self, tmp_path):
        path = tmp_path / "snek.json"
        path.write_text(json.dumps({"grid_width": 12, "cell_px": 20}))
        cfg = _config(["--config", str(path), "--cell-px", "30"])
        assert cfg.grid_width == 12
        assert cfg.cell_px == 30

    def test_invalid_value_exits(self):
        with pytest.raises(SystemExit, match="2"):
            _config(["--width", "0"])

    @pytest.mark.parametrize(
        "payload",
        [{"grid_width": 0}, {"width": 5}],
    )
    def test_invalid_config_file_exits(self, tmp_path, payload):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(payload))
        with pytest.raises(SystemExit, match="2"):
            _config(["--config", str(path)])

    def test_malformed_config_file_exits(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(SystemExit, match="2"):
            _config(["--config", str(path)])

    def test_missing_config_file_exits(self, tmp_path):
        with pytest.raises(SystemExit, match="2"):
            _config(["--config", str(tmp_path / "absent.json")])

    def test_single_cell_grid_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="snek.cli"):
            cfg = _config(["--width", "1", "--height", "1"])
        assert cfg.grid.area == 1
        assert "no free cell" in caplog.text

    def test_regular_grid_does_not_warn(self, caplog):
        with caplog.at_level(logging.WARNING, logger="snek.cli"):
            _config(["--width", "2", "--height", "1"])
        assert "no free cell" not in caplog.text

    def test_bad_log_level_exits(self):
        with pytest.raises(SystemExit):
            cli.main(["--log-level", "LOUD"])


class TestCLIMain:
    def test_main_runs_until_quit(self, monkeypatch):
        import snek.pygame_platform

        monkeypatch.setattr(snek.pygame_platform, "PygamePlatform", QuitImmediately)
        QuitImmediately.instances.clear()
        assert cli.main(["--width", "8", "--height", "6"]) == 0
        platform = QuitImmediately.instances[0]
        assert platform.config.grid_width == 8
        assert platform.closed
