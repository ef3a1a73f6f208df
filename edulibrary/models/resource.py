"""
EduLibrary Backend — Resource SQLAlchemy Model
================================================

What:  ORM model for the `resources` table used by SQLResourceStorage.
Who:   SQLResourceStorage for CRUD, Alembic for schema management.

Table Design:
    - id: String primary key; the value comes from the storage id generator,
      not from the database, so both backends share one id scheme
    - category / skill_level: stored as their label strings
    - resource_type: Text; its only bound is a minimum length
    - video_url: nullable; NULL means "no video"
    - created_at: insertion timestamp, used only to order list() results.
      It is not part of the API representation.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from edulibrary.database import Base
from edulibrary.schemas.resource import Resource, ResourceCreate


class ResourceRecord(Base):
    __tablename__ = "resources"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    skill_level: Mapped[str] = mapped_column(String(20), nullable=False)
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    resource_type: Mapped[str] = mapped_column(Text, nullable=False)
    video_url: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_resources_created_at", "created_at"),
    )

    def apply(self, data: ResourceCreate) -> None:
        """Overwrite every client-writable column from `data`."""
        self.title = data.title
        self.description = data.description
        self.category = data.category.value
        self.skill_level = data.skill_level.value
        self.image_url = data.image_url
        self.resource_type = data.resource_type
        self.video_url = data.video_url

    def to_resource(self) -> Resource:
        return Resource(
            id=self.id,
            title=self.title,
            description=self.description,
            category=self.category,
            skill_level=self.skill_level,
            image_url=self.image_url,
            resource_type=self.resource_type,
            video_url=self.video_url,
        )

    def __repr__(self) -> str:
        return f"<ResourceRecord(id={self.id}, title='{self.title}')>"
