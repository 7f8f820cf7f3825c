from __future__ import annotations

import pytest

from api.app import prepare_app, run_app
from api.cli import build_parser, main


def test_prepare_app_reads_config_and_overrides() -> None:
    cfg = {
        "fps": 30,
        "canvas": {"width": 640, "height": 480, "background_color": "#000000"},
        "simulation": {"gravity": 0.4, "shapes_per_second": 2.0},
        "hud": {"enabled": False},
    }
    setup = prepare_app(cfg=cfg, gravity=1.0, seed=1)
    assert (setup.config.width, setup.config.height) == (640, 480)
    assert setup.config.gravity == pytest.approx(1.0)
    assert setup.config.shapes_per_second == pytest.approx(2.0)
    assert setup.fps == 30
    assert setup.background == "#000000"
    assert setup.hud.enabled is False
    assert setup.simulation.config is setup.config
    assert setup.simulation.manager.get_count() == 0


def test_prepare_app_show_hud_argument_wins() -> None:
    setup = prepare_app(cfg={"hud": {"enabled": False}}, show_hud=True)
    assert setup.hud.enabled is True


def test_run_app_init_only_does_not_open_window() -> None:
    setup = run_app(init_only=True, width=320, height=240, seed=0)
    assert setup is not None
    assert (setup.config.width, setup.config.height) == (320, 240)


def test_cli_parser_maps_flags() -> None:
    args = build_parser().parse_args(["--rate", "2.5", "--gravity", "0.3", "--no-hud"])
    assert args.shapes_per_second == pytest.approx(2.5)
    assert args.gravity == pytest.approx(0.3)
    assert args.show_hud is False
    assert build_parser().parse_args([]).show_hud is None


def test_cli_init_only_exit_codes() -> None:
    assert main(["--init-only", "--seed", "1"]) == 0
    assert main(["--init-only", "--fps", "0"]) == 2
