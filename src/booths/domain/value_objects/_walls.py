"""Wall run value objects: modules, seams and runs."""

from __future__ import annotations

from dataclasses import dataclass

from ._booth import WallSide


@dataclass(frozen=True)
class WallModule:
    """A structural wall module of at most one meter.

    Attributes:
        index: Position of the module along its run, starting at 0.
        start_offset: Distance from the run start to the module's left edge.
        length: Module length in meters, in (0, 1].
    """

    index: int
    start_offset: float
    length: float

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError("Module length must be positive")

    @property
    def end_offset(self) -> float:
        return self.start_offset + self.length

    @property
    def center_offset(self) -> float:
        return self.start_offset + self.length / 2


@dataclass(frozen=True)
class Seam:
    """Boundary between two adjacent modules with trims on both faces.

    Attributes:
        offset: Distance from the run start to the boundary.
        left_module: Index of the module ending at this seam.
        faces: Wall faces that receive a trim strip.
    """

    offset: float
    left_module: int
    faces: tuple[str, ...] = ("inside", "outside")

    @property
    def right_module(self) -> int:
        return self.left_module + 1

    @property
    def trim_count(self) -> int:
        return len(self.faces)


@dataclass(frozen=True)
class WallRun:
    """A straight wall run derived from the floor plan and wall shape.

    Along-axis coordinates are centered, so a run of length L spans
    [-L/2, L/2]. For the back wall the axis follows +X; for side walls
    it follows +Z (back to front).

    Attributes:
        side: Which wall of the booth this run is.
        length: Run length in meters.
        height: Wall height in meters.
        modules: Structural modules covering the run.
    """

    side: WallSide
    length: float
    height: float
    modules: tuple[WallModule, ...]

    @property
    def half_length(self) -> float:
        return self.length / 2

    @property
    def slot_count(self) -> int:
        return len(self.modules)

    def slot_center(self, slot_index: int) -> float:
        """Centered along-axis coordinate of a module slot."""
        if not 0 <= slot_index < len(self.modules):
            raise IndexError(
                f"Slot {slot_index} out of range for {self.side.value} wall "
                f"with {len(self.modules)} modules"
            )
        return self.modules[slot_index].center_offset - self.half_length

    def slot_centers(self) -> list[float]:
        return [m.center_offset - self.half_length for m in self.modules]
