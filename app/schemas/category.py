from pydantic import BaseModel, ConfigDict, Field


class CategoryCreate(BaseModel):
    label: str = Field(min_length=1, max_length=255)
    icon: str = Field(min_length=1)  # emoji or short glyph


class CategoryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    label: str
    icon: str
