#!/usr/bin/env python3
"""
Optional Dear PyGui control panel.

The panel is rendered from the main frame loop with render_dearpygui_frame(), so it
shares the single thread with the pygame window. Widget callbacks only queue
commands; the shell collects them with take_commands() and applies them between
frames together with the keyboard input.
"""
import dearpygui.dearpygui as dpg

from .config import TOGGLES, SimulationConfig, UiDetail
from .controls import FrameCommands
from .physics import kinetic_energy, total_momentum
from .simulation import Simulation

TOGGLE_LABELS = {
    "trails": "Trails",
    "wrap": "Screen wrap",
    "elastic": "Elastic collisions",
    "auto_restart": "Auto-restart",
}


class ControlPanel:
    """
    Dear PyGui window with the simulation toggles, a reset button and live readouts.
    """

    def __init__(self, config: SimulationConfig):
        self._pending = FrameCommands()
        self._build_ui(config)

    def _build_ui(self, config: SimulationConfig):
        dpg.create_context()
        dpg.create_viewport(title="Three Bodies - Controls", width=360, height=320)

        with dpg.window(label="Controls", width=340, height=300, pos=(10, 10), tag="main_window"):
            dpg.add_text("Simulation Controls")
            dpg.add_button(label="Reset", callback=self._on_reset)
            for option in TOGGLES:
                dpg.add_checkbox(label=TOGGLE_LABELS[option], default_value=getattr(config, option),
                                 callback=self._on_toggle, user_data=option, tag=f"toggle_{option}")
            dpg.add_combo([d.value for d in UiDetail], label="Overlay", default_value=config.ui_detail.value,
                          width=120, callback=lambda s, a, u: self._on_ui_detail(a), tag="ui_detail_combo")

            dpg.add_separator()
            dpg.add_text("", tag="status_text")
            dpg.add_text("", tag="step_text")
            dpg.add_text("", tag="energy_text")
            dpg.add_text("", tag="momentum_text")

        dpg.setup_dearpygui()
        dpg.show_viewport()
        dpg.set_primary_window("main_window", True)

    def _on_reset(self):
        self._pending.reset = True

    def _on_toggle(self, sender, app_data, user_data):
        self._pending.toggles.append(user_data)

    def _on_ui_detail(self, value: str):
        self._pending.ui_detail = UiDetail(value)

    @property
    def is_open(self) -> bool:
        return dpg.is_dearpygui_running()

    def take_commands(self) -> FrameCommands:
        """Hand over and forget everything queued since the last call."""
        commands, self._pending = self._pending, FrameCommands()
        return commands

    def sync(self, sim: Simulation, config: SimulationConfig) -> None:
        """Reflect the current configuration and state, then render one panel frame."""
        for option in TOGGLES:
            dpg.set_value(f"toggle_{option}", getattr(config, option))
        dpg.set_value("ui_detail_combo", config.ui_detail.value)
        dpg.set_value("status_text", "Running" if sim.running else f"Stopped: collision {sim.collided}")
        dpg.set_value("step_text", f"Step: {sim.steps}  Trail samples: {len(sim.trails)}")
        dpg.set_value("energy_text", f"Kinetic energy: {kinetic_energy(sim.bodies):.3f}")
        px, py = total_momentum(sim.bodies)
        dpg.set_value("momentum_text", f"Momentum: ({px:.3f}, {py:.3f})")
        dpg.render_dearpygui_frame()

    def close(self) -> None:
        dpg.destroy_context()
