from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from resume_review.accounts.exceptions import (
    InvalidPasswordError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from resume_review.accounts.service import AccountService
from resume_review.api.dependencies import get_account_service
from resume_review.api.schemas import (
    AccountResponse,
    ErrorResponse,
    LoginRequest,
    SignupRequest,
    UserOut,
)
from resume_review.logging.logger import Log

router = APIRouter(tags=["Accounts"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post(
    "/login",
    response_model=AccountResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def login(
    body: LoginRequest,
    accounts: AccountService = Depends(get_account_service),
) -> AccountResponse | JSONResponse:
    try:
        profile = accounts.login(body.username, body.password)
    except UserNotFoundError:
        return _error(404, "User not found")
    except InvalidPasswordError:
        return _error(401, "Invalid password")
    except Exception as exc:
        Log.exception(f"Login error: {exc}")
        return _error(500, "Internal server error")
    return AccountResponse(message="Login successful", user=UserOut.from_profile(profile))


@router.post(
    "/signup",
    status_code=201,
    response_model=AccountResponse,
    responses={400: {"model": ErrorResponse}},
)
def signup(
    body: SignupRequest,
    accounts: AccountService = Depends(get_account_service),
) -> AccountResponse | JSONResponse:
    try:
        profile = accounts.signup(
            username=body.username,
            email=body.email,
            password=body.password,
            name=body.name,
            age=body.age,
        )
    except UserAlreadyExistsError:
        return _error(400, "User already exists")
    except Exception as exc:
        Log.exception(f"Signup error: {exc}")
        return _error(500, "Internal server error")
    return AccountResponse(message="User created successfully", user=UserOut.from_profile(profile))
