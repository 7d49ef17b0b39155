"""
User API schemas.

Pydantic models for user-related request/response validation.
"""

from pydantic import BaseModel, EmailStr, Field

from app.schemas.common import CamelModel
from app.schemas.workout_plan import WorkoutPlanResponse


# Request schemas
class UserSignup(CamelModel):
    """Schema for user registration."""
    name: str = Field(..., min_length=1, max_length=100, description="Display name (1-100 characters)")
    email: EmailStr
    password: str = Field(..., min_length=8, description="Password (min 8 characters)")


class UserLogin(CamelModel):
    """Schema for user login."""
    email: EmailStr
    password: str


# Response schemas
class UserStatus(CamelModel):
    id: int
    email: str
    name: str
    workout_plans: list[WorkoutPlanResponse] = []


class LoginPayload(CamelModel):
    access_token: str


class UserStatusPayload(CamelModel):
    user_status: UserStatus


# OAuth2 form login (interactive docs)
class Token(BaseModel):
    """Schema for JWT token response."""
    access_token: str
    token_type: str = "bearer"
