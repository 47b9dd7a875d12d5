"""Point-mass body state."""

from typing import Mapping, Optional
from nbody_sim.physics.vec3 import Point3, Vec3


# Column names of one initial-conditions row, in order
ROW_FIELDS = ("pos_x", "pos_y", "pos_z", "vel_x", "vel_y", "vel_z", "mass")


class Body:
    """A point mass with position, velocity and pre-scaled mass.

    ``mass`` stores ``G * m`` so the force law needs no separate constant.
    ``next_velocity`` is a staging buffer used only by integrators that
    compute every new velocity before committing any of them; it is ``None``
    for schemes that update in place.
    """

    __slots__ = ("position", "velocity", "mass", "next_velocity")

    def __init__(
        self,
        position: Point3,
        velocity: Vec3,
        mass: float,
        next_velocity: Optional[Vec3] = None
    ):
        self.position = position
        self.velocity = velocity
        self.mass = float(mass)
        self.next_velocity = next_velocity

    @classmethod
    def from_row(cls, row: Mapping[str, float]) -> "Body":
        """Build a body from the seven initial-condition fields.

        Args:
            row: Mapping with keys pos_x, pos_y, pos_z, vel_x, vel_y, vel_z, mass

        Returns:
            New Body
        """
        return cls(
            Point3(float(row["pos_x"]), float(row["pos_y"]), float(row["pos_z"])),
            Vec3(float(row["vel_x"]), float(row["vel_y"]), float(row["vel_z"])),
            float(row["mass"]),
        )

    def to_row(self) -> dict:
        """Inverse of from_row."""
        p, v = self.position, self.velocity
        return dict(zip(ROW_FIELDS, (p.x, p.y, p.z, v.x, v.y, v.z, self.mass)))

    @property
    def speed(self) -> float:
        return self.velocity.length()

    def copy(self) -> "Body":
        # Vec3 is immutable, so sharing components is safe
        return Body(self.position, self.velocity, self.mass, self.next_velocity)

    def __repr__(self) -> str:
        return (
            f"Body(position={self.position!r}, velocity={self.velocity!r}, "
            f"mass={self.mass!r})"
        )

    def __str__(self) -> str:
        return f"r = [{self.position:e}], v = [{self.velocity:e}], Gm = {self.mass:e}"
