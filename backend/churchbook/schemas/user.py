"""Pydantic schemas for Users."""
from __future__ import annotations
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, field_validator

from churchbook.models.role import Role


class UserCreate(BaseModel):
    name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    role: Role = Role.member

    @field_validator("role", mode="before")
    @classmethod
    def _canonical_role(cls, v):
        return Role.parse(v)


class UserUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    role: Optional[Role] = None

    @field_validator("role", mode="before")
    @classmethod
    def _canonical_role(cls, v):
        return None if v is None else Role.parse(v)


class UserOut(BaseModel):
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    role: Optional[str] = None
    created_at: Optional[datetime] = None
