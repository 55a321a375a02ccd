"""DTOs for Identity app."""
from dataclasses import dataclass
from typing import Optional, List

from ninja import Schema
from pydantic import Field


@dataclass(frozen=True)
class UserDTO:
    id: int
    username: str
    email: str
    role: str
    is_active: bool
    permissions: List[str]


class UserOut(Schema):
    id: int
    username: str
    email: str
    role: str
    is_active: bool
    permissions: List[str]


class RegisterIn(Schema):
    username: str = Field(..., min_length=1, max_length=150)
    email: str = Field("", max_length=254)
    password: str = Field(..., min_length=8, max_length=128)
    first_name: Optional[str] = Field(None, max_length=150)
    last_name: Optional[str] = Field(None, max_length=150)


class LoginIn(Schema):
    username: str
    password: str


class TokenOut(Schema):
    token: str
    token_type: str = "bearer"
    user: UserOut
