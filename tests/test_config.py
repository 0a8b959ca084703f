import pytest

from threebody.config import SimulationConfig, UiDetail


def test_defaults():
    config = SimulationConfig()
    assert config.trails
    assert config.trail_decay == 0.995
    assert not config.wrap
    assert not config.elastic
    assert not config.auto_restart
    assert config.ui_detail is UiDetail.MINIMAL
    assert config.radius_policy == "mass"
    assert config.gravity_scale == 9.81
    assert config.body_count == 3


@pytest.mark.parametrize("option", ["trails", "wrap", "elastic", "auto_restart"])
def test_toggled_returns_flipped_copy(option):
    config = SimulationConfig()
    flipped = config.toggled(option)
    assert getattr(flipped, option) is not getattr(config, option)
    assert flipped.toggled(option) == config


def test_ui_detail_cycles():
    config = SimulationConfig(ui_detail=UiDetail.OFF)
    seen = []
    for _ in range(3):
        config = config.toggled("ui_detail")
        seen.append(config.ui_detail)
    assert seen == [UiDetail.MINIMAL, UiDetail.FULL, UiDetail.OFF]


def test_unknown_toggle():
    with pytest.raises(ValueError):
        SimulationConfig().toggled("gravity_scale")


def test_radius_policy():
    assert SimulationConfig(radius_policy="mass").radius_for(7.5) == 7.5
    assert SimulationConfig(radius_policy="fixed", fixed_radius=5.0).radius_for(7.5) == 5.0


@pytest.mark.parametrize("kwargs", [
    {"trail_decay": 0.0},
    {"trail_decay": 1.5},
    {"trail_cutoff": 0.0},
    {"radius_policy": "area"},
    {"fixed_radius": -1.0},
    {"body_count": 1},
])
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValueError):
        SimulationConfig(**kwargs)


def test_unbounded_trails_allowed():
    assert SimulationConfig(trail_decay=None).trail_decay is None
