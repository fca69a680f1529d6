from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String
from smartbin.core.base import Base, TimestampedMixin

class Bin(Base, TimestampedMixin):
    # name doubles as the physical bin label (e.g. "BIN-001")
    name: Mapped[str] = mapped_column(String(60), unique=True)
