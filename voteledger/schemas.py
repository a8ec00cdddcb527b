from pydantic import BaseModel, ConfigDict, Field


class CandidateCreate(BaseModel):
    name: str = Field(..., examples=["Alice"])


class CandidateOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    vote_count: int = Field(..., alias="voteCount")


class CandidateAddedOut(BaseModel):
    message: str
    index: int


class VoteOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    voter_identity: str = Field(..., alias="voterIdentity")
    candidate_index: int = Field(..., alias="candidateIndex")


class WinnerOut(BaseModel):
    winner: str


class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"
