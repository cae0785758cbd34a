import logging
import time
from dataclasses import dataclass
from typing import Optional, Type

from physvec.config.settings import (
    OSCILLATOR_INITIAL_DISPLACEMENT,
    OSCILLATOR_LENGTH,
    OSCILLATOR_MASS,
    OSCILLATOR_STEP,
    OSCILLATOR_STIFFNESS,
)
from physvec.entities.array_vector import ArrayVector
from physvec.entities.vector2d import Vector2D
from physvec.entities.vector3d import Vector3D
from physvec.entities.vector_base import Vector
from physvec.simulation.trace_writer import TraceWriter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HarmonicOscillatorModel:
    """A point mass hanging from the origin on a linear spring.

    Attributes:
        length (float): Free length of the spring.
        mass (float): Mass of the hanging body.
        stiffness (float): Force per unit strain.
        initial_displacement (float): Extension beyond the free length at t = 0.
    """

    length: float = OSCILLATOR_LENGTH
    mass: float = OSCILLATOR_MASS
    stiffness: float = OSCILLATOR_STIFFNESS
    initial_displacement: float = OSCILLATOR_INITIAL_DISPLACEMENT

    def __post_init__(self):
        if self.length <= 0:
            raise ValueError("length should be greater than zero")
        if self.mass <= 0:
            raise ValueError("mass should be greater than zero")


class HarmonicOscillatorSolver:
    """Explicit Euler integration of ``HarmonicOscillatorModel`` on a chosen vector implementation.

    The body starts straight below the support (negative y). Only the public vector API is used, so the same
    model run on ``Vector2D``, ``Vector3D`` and ``ArrayVector`` must produce the same trajectory.

    Args:
        model (HarmonicOscillatorModel): The physical model.
        vector_type (Type[Vector]): Concrete vector class, called with the components unpacked.
        dimension (int, optional): Dimension for ``ArrayVector``. Fixed-size types use their own.
        step (float, optional): Time step in seconds.
    """

    def __init__(
        self,
        model: HarmonicOscillatorModel,
        vector_type: Type[Vector],
        dimension: Optional[int] = None,
        step: float = OSCILLATOR_STEP,
    ):
        if step <= 0:
            raise ValueError("step should be greater than zero")
        if vector_type is Vector2D:
            dimension = Vector2D.DIMENSION
        elif vector_type is Vector3D:
            dimension = Vector3D.DIMENSION
        elif dimension is None:
            dimension = 3
        if dimension < 2:
            raise ValueError("the oscillator needs at least two dimensions")

        self.model = model
        self.vector_type = vector_type
        self.step = step

        zeros = [0.0] * dimension
        initial = list(zeros)
        initial[1] = -(model.length + model.initial_displacement)

        self.support: Vector = vector_type(*zeros)
        self.position: Vector = vector_type(*initial)
        self.velocity: Vector = vector_type(*zeros)
        self.force: Vector = vector_type(*zeros)

    def _calculate_force(self):
        spring = self.position.minus(self.support)
        elongation = spring.magnitude() - self.model.length
        strain = elongation / self.model.length
        force_scalar = self.model.stiffness * strain
        self.force = spring.normalized().negative().times(force_scalar)

    def _calculate_velocity(self):
        acceleration = self.force.times(1 / self.model.mass)
        self.velocity = self.velocity.plus(acceleration.times(self.step))

    def _calculate_position(self):
        self.position = self.position.plus(self.velocity.times(self.step))

    def do_step(self):
        self._calculate_force()
        self._calculate_velocity()
        self._calculate_position()

    def vertical_position(self) -> float:
        return self.position.get(1)


def simulate(solver: HarmonicOscillatorSolver, steps: int, writer: Optional[TraceWriter] = None) -> list[float]:
    """Run ``steps`` integration steps and return the vertical position after each one.

    When ``writer`` is given, every position is also written to its trace.
    """
    logger.info("Solving %d steps with %s", steps, solver.vector_type.__name__)
    start = time.perf_counter()
    trace = []
    for _ in range(steps):
        solver.do_step()
        position = solver.vertical_position()
        trace.append(position)
        if writer is not None:
            writer.write_value(position)
    logger.info("Finished in %.1f ms", (time.perf_counter() - start) * 1000)
    return trace


IMPLEMENTATIONS: dict[str, Type[Vector]] = {
    "vector2D": Vector2D,
    "vector3D": Vector3D,
    "arrayVector": ArrayVector,
}
