"""Main simulator controller."""

import logging
from typing import Callable, List, Optional, Tuple
import numpy as np
from nbody_sim.physics.body import Body
from nbody_sim.physics.integrators.base import Integrator
from nbody_sim.physics.integrators.euler import ForwardEulerIntegrator
from nbody_sim.physics.integrators.leapfrog import LeapfrogIntegrator
from nbody_sim.physics.world import World

logger = logging.getLogger(__name__)


class Simulator:
    """Main simulation controller.

    Drives one World with one integrator at a fixed time step.
    """

    def __init__(
        self,
        world: World,
        integrator: Optional[Integrator] = None,
        dt: float = 1e-3
    ):
        """Initialize simulator.

        Args:
            world: World to advance (owned by the simulator from now on)
            integrator: Integrator to use (default: forward Euler)
            dt: Time step, must be positive
        """
        if not dt > 0:
            raise ValueError(f"Time step must be positive, got {dt}")
        self.world = world
        self.integrator = integrator or ForwardEulerIntegrator()
        self.dt = float(dt)
        self.step_count = 0
        self._prepared = False

        # Callbacks
        self.on_step_callback: Optional[Callable] = None

        self.integrator.attach(self.world)

    @property
    def time(self) -> float:
        return self.world.time

    @property
    def bodies(self) -> Tuple[Body, ...]:
        return self.world.bodies

    def half_tick_velocity(self):
        """Leapfrog half kick. Only valid for the leapfrog integrator."""
        if not isinstance(self.integrator, LeapfrogIntegrator):
            raise TypeError(
                f"half_tick_velocity requires the leapfrog integrator, "
                f"not {self.integrator.name}"
            )
        self.integrator.half_tick_velocity(self.world, self.dt)
        self._prepared = True

    def prepare(self):
        """Run the integrator's one-time start-up step (idempotent)."""
        if self._prepared:
            return
        self.integrator.prepare(self.world, self.dt)
        self._prepared = True

    def tick(self):
        """Perform one simulation step."""
        self.integrator.tick(self.world, self.dt)
        self.step_count += 1
        # Start-up step only applies before the first tick
        self._prepared = True

        if self.on_step_callback:
            self.on_step_callback(self)

    def run(self, duration: float) -> int:
        """Run until simulated time reaches ``duration``.

        Steps are whole ticks, so the final time may overshoot ``duration``
        by less than one step.

        Args:
            duration: Target simulated time

        Returns:
            Number of ticks performed
        """
        self.prepare()
        logger.debug(
            "Running %s on %d bodies: dt=%g, duration=%g",
            self.integrator.name, len(self.world), self.dt, duration
        )
        start = self.step_count
        while self.world.time < duration:
            self.tick()
        n_ticks = self.step_count - start
        logger.info("Simulated t=%g in %d ticks (%s)", self.world.time, n_ticks, self.integrator.name)
        return n_ticks

    def into_rest_frame(self, index: int):
        self.world.into_rest_frame(index)


class TrajectoryRecorder:
    """Step callback that keeps position snapshots.

    Attach with ``sim.on_step_callback = recorder`` after calling
    ``recorder.record(sim)`` once for the initial state.
    """

    def __init__(self, every: int = 1):
        if every < 1:
            raise ValueError(f"Recording interval must be >= 1, got {every}")
        self.every = every
        self._times: List[float] = []
        self._positions: List[np.ndarray] = []

    def record(self, sim: Simulator):
        positions, _, _ = sim.world.get_state()
        self._times.append(sim.time)
        self._positions.append(positions)

    def __call__(self, sim: Simulator):
        if sim.step_count % self.every == 0:
            self.record(sim)

    @property
    def times(self) -> np.ndarray:
        return np.array(self._times)

    @property
    def positions(self) -> np.ndarray:
        """Snapshots as a (k, n, 3) array."""
        if not self._positions:
            return np.zeros((0, 0, 3))
        return np.stack(self._positions)

    def __len__(self) -> int:
        return len(self._times)
