"""Pydantic schemas for catalog store entities (recipes and reviews)."""

from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import List, Optional, Dict, Union


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


class RecipeCreate(BaseModel):
    """Full recipe payload, used for both creation and full replacement."""

    owner_id: str = Field(..., min_length=1, max_length=255)
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    steps: Union[str, List[str]]

    @field_validator("owner_id", "title", "description")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return _require_text(v)

    @field_validator("steps")
    @classmethod
    def steps_not_empty(cls, v):
        """Steps are either free text or a non-empty list of non-blank lines."""
        if isinstance(v, str):
            return _require_text(v)
        if not v:
            raise ValueError("must contain at least one step")
        for step in v:
            _require_text(step)
        return v


class ReviewCreate(BaseModel):
    """Full review payload, used for both creation and full replacement."""

    recipe_id: int = Field(..., gt=0)
    owner_id: str = Field(..., min_length=1, max_length=255)
    title: str = Field(..., min_length=1)
    rating: float = Field(..., allow_inf_nan=False)
    body: Optional[str] = None

    @field_validator("owner_id", "title")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return _require_text(v)


class RecipeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: str
    title: str
    description: str
    steps: Union[str, List[str]]


class ReviewResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    recipe_id: int
    owner_id: str
    title: str
    rating: float
    body: Optional[str] = None


class CreatedResponse(BaseModel):
    """Body of a 201 response: new identity plus a link to the resource."""

    id: Union[int, str]
    links: Dict[str, str]


class LinksResponse(BaseModel):
    links: Dict[str, str]
