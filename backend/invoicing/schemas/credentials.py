"""Sign-in Credentials Schema — shape accepted by the credentials strategy.

Invariants:
    - email: non-empty, one "@", a dot in the domain
    - password: at least 6 characters
"""

from pydantic import BaseModel, ConfigDict, Field


class SignInCredentials(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    password: str = Field(min_length=6)
