from pydantic import BaseModel


class UserName(BaseModel):
    """
    Reviewer as nested under a game detail: name only.
    """
    name: str

    class Config:
        from_attributes = True
