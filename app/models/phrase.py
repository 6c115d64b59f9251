from sqlalchemy.orm import relationship
from sqlalchemy import Boolean, Column, ForeignKey, Integer, Text, false
from app.core.db import Base


class Phrase(Base):
    __tablename__ = "phrases"
    id = Column(Integer, primary_key=True)
    text = Column(Text, nullable=False)
    category_id = Column(
        Integer,
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    pinned = Column(Boolean, nullable=False, default=False, server_default=false())

    category = relationship("Category", back_populates="phrases")

    def __repr__(self) -> str:
        return f"<Phrase id={self.id} category_id={self.category_id} pinned={self.pinned}>"
