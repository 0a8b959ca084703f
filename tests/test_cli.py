import pytest

from three_bodies import build_parser, config_from_args, main
from threebody.config import UiDetail


def test_defaults_match_config_defaults():
    config = config_from_args(build_parser().parse_args([]))
    assert config.body_count == 3
    assert config.seed == 42
    assert config.trails
    assert config.trail_decay == 0.995
    assert config.ui_detail is UiDetail.MINIMAL


def test_flags():
    args = build_parser().parse_args([
        "--wrap", "--elastic", "--auto-restart", "--no-trail-decay",
        "--radius-policy", "fixed", "--fixed-radius", "6", "--ui", "full", "--seed", "3",
    ])
    config = config_from_args(args)
    assert config.wrap and config.elastic and config.auto_restart
    assert config.trail_decay is None
    assert config.radius_for(9.0) == 6.0
    assert config.ui_detail is UiDetail.FULL
    assert config.seed == 3


def test_invalid_body_count_exits():
    with pytest.raises(SystemExit):
        main(["--bodies", "1"])
