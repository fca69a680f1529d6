import uuid
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, ForeignKey, UniqueConstraint
from smartbin.core.base import Base, TimestampedMixin

class Asset(Base, TimestampedMixin):
    __table_args__ = (UniqueConstraint("bin_id", "storage_id", name="uq_asset_bin_storage"),)

    bin_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("bin.id"), index=True)
    url: Mapped[str] = mapped_column(String(1024))
    # opaque id assigned by the media host, used for deletion
    storage_id: Mapped[str] = mapped_column(String(512))
