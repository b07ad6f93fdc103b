"""
Water Rocket Staging Controller

This module handles the stage state machine for the flight. States are the
stage indices 0, 1, 2; stage 2 is terminal.

A transition i -> i+1 happens when both hold at the end of a time step:
  - flight time has reached the separation time of stage i
  - stage i has no water left
On transition the next stage's water and pressure are loaded and its
StageSpec (dry mass, area, tank volume) becomes the active one.
"""

import logging
from typing import Optional, Sequence

from .mass import is_propellant_exhausted
from .stages import StageConfig, StageSpec
from .state import SeparationEvent, WorkingState

logger = logging.getLogger(__name__)


class StagingController:
    """
    Decides when the active stage separates and reloads propellant state.
    """

    def __init__(self, stage_specs: Sequence[StageSpec], stage_configs: Sequence[StageConfig]):
        if len(stage_specs) != len(stage_configs):
            raise ValueError(
                f"Got {len(stage_specs)} stage specs but {len(stage_configs)} stage configs"
            )
        self.stage_specs = tuple(stage_specs)
        self.stage_configs = tuple(stage_configs)
        self.current_stage = 0
        self.events = []

    @property
    def final_stage(self) -> int:
        return len(self.stage_specs) - 1

    @property
    def active_spec(self) -> StageSpec:
        return self.stage_specs[self.current_stage]

    def is_terminal(self) -> bool:
        return self.current_stage >= self.final_stage

    def should_separate(self, time: float, water_mass: float) -> bool:
        """Check the separation gate for the current stage."""
        if self.is_terminal():
            return False
        separation_time = self.active_spec.separation_time
        if separation_time is None:
            return False
        return time >= separation_time and is_propellant_exhausted(water_mass)

    def update(self, state: WorkingState) -> Optional[SeparationEvent]:
        """
        Evaluate the transition rule once, after the kinematics update.

        On separation the working state is reloaded in place with the next
        stage's propellant.

        Args:
            state: Working state of the loop (mutated on separation)

        Returns:
            The SeparationEvent if the stage separated, else None
        """
        if not self.should_separate(state.time, state.water_mass):
            return None

        event = SeparationEvent(
            time=state.time,
            from_stage=self.current_stage + 1,
            height=state.height,
            velocity=state.velocity,
        )
        self.events.append(event)

        self.current_stage += 1
        state.load_stage(self.current_stage, self.stage_configs[self.current_stage])

        logger.info(f"Stage {event.from_stage} separation at t={event.time:.2f}s, "
                    f"h={event.height:.2f}m, v={event.velocity:.2f}m/s; "
                    f"stage {self.current_stage + 1} loaded with "
                    f"{state.water_mass * 1000:.0f} mL at {state.pressure:.0f} Pa")
        return event
