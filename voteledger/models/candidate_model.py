from pydantic import BaseModel, Field


class Candidate(BaseModel):
    index: int = Field(..., ge=0, examples=[0])
    name: str = Field(..., examples=["Alice"])
    vote_count: int = Field(default=0, ge=0)
