from pydantic import BaseModel, Field

from resume_review.accounts.models import UserProfile


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class SignupRequest(BaseModel):
    username: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    age: int = Field(..., ge=0)
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)


class UserOut(BaseModel):
    username: str
    email: str
    name: str
    age: int

    @classmethod
    def from_profile(cls, profile: UserProfile) -> "UserOut":
        return cls(
            username=profile.username,
            email=profile.email,
            name=profile.name,
            age=profile.age,
        )


class AccountResponse(BaseModel):
    message: str
    user: UserOut


class ReviewResponse(BaseModel):
    response: str


class ErrorResponse(BaseModel):
    error: str
