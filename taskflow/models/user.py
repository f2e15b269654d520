from typing import TYPE_CHECKING, List

from sqlmodel import SQLModel, Field, Relationship

if TYPE_CHECKING:
    from .task import Task


class User(SQLModel, table=True):
    """Registered account. The username is the primary key and the token subject."""
    __tablename__ = "users"

    username: str = Field(primary_key=True, max_length=50)
    email: str = Field(unique=True, index=True, max_length=100)
    password_hash: str

    # Deleting a user removes the tasks it owns
    tasks: List["Task"] = Relationship(
        back_populates="owner",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )
