"""Snapshot schemas for dice and bags.

A snapshot is everything needed to bring a die back exactly as it was,
including the seed its random stream will continue from. These models
are the only shape the persistence layer reads and writes.
"""

from pydantic import BaseModel, Field, model_validator


SNAPSHOT_VERSION = 1

MAX_SEED = 2**64 - 1


class DieSnapshot(BaseModel):
    """Complete state of a single die."""

    version: int = Field(default=SNAPSHOT_VERSION, description="Snapshot format version")
    die_id: str = Field(..., min_length=1, description="Stable identity of the die")
    sides: int = Field(..., ge=1, description="Number of sides")
    seed: int = Field(..., ge=0, le=MAX_SEED, description="Current seed of the random stream")
    face: int = Field(..., ge=1, description="Face currently showing")
    roll_history: list[int] = Field(default_factory=list, description="Every roll, oldest first")
    user_history: list[str] = Field(
        default_factory=list,
        description="Who made each roll, parallel to roll_history",
    )
    nickname: str | None = Field(default=None, description="The die's name, if any")

    @model_validator(mode="after")
    def check_invariants(self) -> "DieSnapshot":
        """Reject snapshots no real die could have produced."""
        if self.version != SNAPSHOT_VERSION:
            raise ValueError(f"Unsupported snapshot version {self.version}")
        if self.face > self.sides:
            raise ValueError(f"Face {self.face} is not on a {self.sides}-sided die")
        if len(self.roll_history) != len(self.user_history):
            raise ValueError(
                f"History length mismatch: {len(self.roll_history)} rolls, "
                f"{len(self.user_history)} users"
            )
        for value in self.roll_history:
            if not 1 <= value <= self.sides:
                raise ValueError(f"Roll {value} is impossible on a {self.sides}-sided die")
        return self


class BagSnapshot(BaseModel):
    """Complete state of a dice bag."""

    version: int = Field(default=SNAPSHOT_VERSION, description="Snapshot format version")
    nickname: str = Field(default="", description="The bag's name")
    dice: list[DieSnapshot] = Field(default_factory=list, description="Every die in the bag")

    @model_validator(mode="after")
    def check_unique_dice(self) -> "BagSnapshot":
        """A die can only be in the bag once."""
        if self.version != SNAPSHOT_VERSION:
            raise ValueError(f"Unsupported snapshot version {self.version}")
        seen: set[str] = set()
        for die in self.dice:
            if die.die_id in seen:
                raise ValueError(f"Die {die.die_id} appears twice in the bag")
            seen.add(die.die_id)
        return self
