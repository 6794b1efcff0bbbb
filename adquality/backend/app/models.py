# app/models.py
from __future__ import annotations

from sqlalchemy import Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from .domain.types import PictureQuality, Typology


class Base(DeclarativeBase):
    pass


class Ad(Base):
    __tablename__ = "ads"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    typology: Mapped[Typology] = mapped_column(Enum(Typology), index=True)
    description: Mapped[str] = mapped_column(Text, default="")

    house_size: Mapped[int | None] = mapped_column(Integer, nullable=True)
    garden_size: Mapped[int | None] = mapped_column(Integer, nullable=True)


class Picture(Base):
    __tablename__ = "pictures"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    url: Mapped[str] = mapped_column(String(500))

    # NULL when the source had no (or an unknown) tag
    quality: Mapped[PictureQuality | None] = mapped_column(Enum(PictureQuality), nullable=True)


class AdPicture(Base):
    """Ordered link between an ad and its pictures; the same picture may repeat."""
    __tablename__ = "ad_pictures"

    ad_id: Mapped[int] = mapped_column(ForeignKey("ads.id"), primary_key=True)
    position: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    picture_id: Mapped[int] = mapped_column(ForeignKey("pictures.id"))
