
from datetime import datetime
from sqlalchemy import Integer, Text, DateTime, Index, func
from sqlalchemy.orm import Mapped, mapped_column
from .db import Base

class Note(Base):
    __tablename__ = "notes"
    __table_args__ = (Index("notes_id_uindex", "id", unique=True),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
