"""Scope entity types shared by the test suite."""

from __future__ import annotations

from dataclasses import dataclass, field

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class UserGroup(Base):
    __tablename__ = "user_groups"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    code: Mapped[str] = mapped_column(String(20))
    owner_id: Mapped[int | None] = mapped_column(ForeignKey("users.id"), nullable=True)


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), default="")
    role: Mapped[str] = mapped_column(String(50), default="user")
    group_id: Mapped[int | None] = mapped_column(ForeignKey("user_groups.id"), nullable=True)

    posts: Mapped[list[Post]] = relationship("Post", back_populates="author")


class Post(Base):
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(200), default="")
    author_id: Mapped[int | None] = mapped_column(ForeignKey("users.id"), nullable=True)

    author: Mapped[User | None] = relationship("User", back_populates="posts")


@dataclass
class Invite:
    """Plain dataclass scope entity (not mapped)."""

    code: str
    group_id: int
    inviter_id: int | None = None
    tags: list[str] = field(default_factory=list)


class Ticket:
    """Plain class scope entity accepting keyword arguments."""

    def __init__(self, number: int | None = None, queue: str = "default") -> None:
        self.number = number
        self.queue = queue
