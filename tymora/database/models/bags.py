"""Stored dice bags and the dice inside them."""

from sqlalchemy import ForeignKey, Index, Integer, JSON, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tymora.database.models.base import Base, TimestampMixin


class StoredBag(Base, TimestampMixin):
    """A named dice bag.

    Attributes:
        id: Primary key.
        name: Unique lookup name used by the CLI.
        nickname: The bag's own nickname, as carried by DiceBag.
        dice: Dice in the bag, in bag order.
    """

    __tablename__ = "dice_bags"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        unique=True,
        index=True,
    )
    nickname: Mapped[str] = mapped_column(String(200), nullable=False, default="")

    dice: Mapped[list["StoredDie"]] = relationship(
        back_populates="bag",
        cascade="all, delete-orphan",
        order_by="StoredDie.position",
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<StoredBag {self.name!r} dice={len(self.dice)}>"


class StoredDie(Base, TimestampMixin):
    """A single die, kept as its snapshot.

    The snapshot is the source of truth; sides is duplicated for queries.

    Attributes:
        id: Primary key.
        bag_id: Foreign key to the owning bag.
        die_id: Stable identity of the die.
        sides: Number of sides.
        position: Order of the die within its bag.
        snapshot_data: DieSnapshot as JSON.
    """

    __tablename__ = "dice"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    bag_id: Mapped[int] = mapped_column(
        ForeignKey("dice_bags.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    die_id: Mapped[str] = mapped_column(String(64), nullable=False)
    sides: Mapped[int] = mapped_column(Integer, nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    snapshot_data: Mapped[dict] = mapped_column(
        JSON,
        nullable=False,
        comment="Complete die state as JSON",
    )

    bag: Mapped[StoredBag] = relationship(back_populates="dice")

    __table_args__ = (
        Index("ix_dice_bag_die", "bag_id", "die_id", unique=True),
        Index("ix_dice_bag_sides", "bag_id", "sides"),
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<StoredDie {self.die_id[:8]} d{self.sides} bag={self.bag_id}>"
