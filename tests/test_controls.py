import pygame

from threebody.config import SimulationConfig, UiDetail
from threebody.controls import FrameCommands, apply_toggles, commands_from_events


def key_up(key):
    return pygame.event.Event(pygame.KEYUP, key=key)


def test_space_release_requests_reset():
    commands = commands_from_events([key_up(pygame.K_SPACE)])
    assert commands.reset
    assert not commands.quit


def test_key_press_alone_does_nothing():
    commands = commands_from_events([pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)])
    assert commands == FrameCommands()


def test_quit_sources():
    assert commands_from_events([key_up(pygame.K_ESCAPE)]).quit
    assert commands_from_events([pygame.event.Event(pygame.QUIT)]).quit


def test_toggle_keys():
    keys = [pygame.K_h, pygame.K_r, pygame.K_e, pygame.K_w, pygame.K_t]
    commands = commands_from_events([key_up(k) for k in keys])
    assert commands.toggles == ["ui_detail", "auto_restart", "elastic", "wrap", "trails"]


def test_apply_toggles():
    config = SimulationConfig()
    commands = FrameCommands(toggles=["elastic", "wrap", "ui_detail"])
    updated = apply_toggles(config, commands)
    assert updated.elastic and updated.wrap
    assert updated.ui_detail is UiDetail.FULL
    assert config.elastic is False


def test_same_toggle_twice_cancels_out():
    config = SimulationConfig()
    assert apply_toggles(config, FrameCommands(toggles=["trails", "trails"])) == config


def test_explicit_ui_detail():
    config = apply_toggles(SimulationConfig(), FrameCommands(ui_detail=UiDetail.OFF))
    assert config.ui_detail is UiDetail.OFF


def test_merge():
    keyboard = FrameCommands(toggles=["wrap"])
    panel = FrameCommands(reset=True, toggles=["elastic"], ui_detail=UiDetail.FULL)
    merged = keyboard.merge(panel)
    assert merged.reset and not merged.quit
    assert merged.toggles == ["wrap", "elastic"]
    assert merged.ui_detail is UiDetail.FULL
