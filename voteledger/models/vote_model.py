from pydantic import BaseModel, ConfigDict, Field, StrictInt


class Vote(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    voter_identity: str = Field(..., alias="voterIdentity")
    candidate_index: StrictInt = Field(..., alias="candidateIndex")
