from pydantic import BaseModel, ConfigDict, Field, field_validator


class PhraseCreate(BaseModel):
    text: str = Field(min_length=1)
    category_id: int

    @field_validator("category_id", mode="before")
    @classmethod
    def reject_bool(cls, v):
        # bool is an int subclass and would otherwise become category 0 or 1
        if isinstance(v, bool):
            raise ValueError("category_id must be an integer, not a boolean")
        return v


class PhraseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    text: str
    category_id: int
    pinned: bool


class PinToggleRequest(BaseModel):
    current_pinned: bool


class PinToggleResult(BaseModel):
    success: bool
    phrase_id: int
    pinned: bool


class CarouselFrame(BaseModel):
    """One position of the carousel; indices wrap around in both directions."""
    phrase: PhraseRead
    index: int
    total: int
    previous_index: int
    next_index: int
