from sqlalchemy.orm import relationship
from sqlalchemy import Column, Integer, String, Text, Index
from app.core.db import Base


class Category(Base):
    __tablename__ = "categories"
    __table_args__ = (
        Index("categories_label_unique", "label", unique=True),
    )

    id = Column(Integer, primary_key=True)
    label = Column(String(255), nullable=False)
    icon = Column(Text, nullable=False)  # emoji or short glyph

    # Rows are removed by the database cascade, not by the ORM
    phrases = relationship(
        "Phrase",
        back_populates="category",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Category id={self.id} label={self.label!r}>"
