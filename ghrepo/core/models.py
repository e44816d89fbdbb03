"""Request and response shapes for the GitHub REST endpoints ghrepo talks to.

Both models are flat records built right before a request and thrown away
once the response has been handled.
"""
from __future__ import annotations
from typing import Any, Dict
from pydantic import BaseModel, Field, field_validator


class NewIssue(BaseModel):
    """Outbound payload for the "create an issue" endpoint.

    Attributes:
        title: Issue title. The only field GitHub requires.
        body: Free-form issue body.
    """

    title: str = Field(..., min_length=1)
    body: str = ""

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump()


class Repository(BaseModel):
    """A repository as sent to, and returned by, ``/user/repos``.

    GitHub returns dozens of extra keys per repository; only these three are
    kept. A missing description comes back as ``null`` and is stored as "".
    """

    name: str
    description: str = ""
    private: bool = False

    @field_validator("description", mode="before")
    @classmethod
    def _null_description(cls, v):
        return "" if v is None else v

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump()
