from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, TIMESTAMP
from smartbin.core.base import Base, TimestampedMixin, utcnow

TYPE_MAX_LENGTH = 64
BINLOCATION_MAX_LENGTH = 255

class Waste(Base, TimestampedMixin):
    type: Mapped[str] = mapped_column(String(TYPE_MAX_LENGTH))  # as reported by the bin's classifier
    normalized_type: Mapped[str] = mapped_column(String(TYPE_MAX_LENGTH))  # lowercase of type
    binlocation: Mapped[str] = mapped_column(String(BINLOCATION_MAX_LENGTH))
    image_url: Mapped[str] = mapped_column(String(1024))
    storage_id: Mapped[str] = mapped_column(String(512))
    category: Mapped[str | None] = mapped_column(String(32), nullable=True)  # biodegradable | recyclable | miscellaneous
    disposed_at: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True), default=utcnow, index=True)
