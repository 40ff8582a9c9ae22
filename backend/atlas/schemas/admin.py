"""Pydantic schemas for the admin session endpoints."""
from typing import Optional
from pydantic import BaseModel


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class SessionStatus(BaseModel):
    success: bool
    message: str
