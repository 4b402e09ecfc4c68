from fastapi import APIRouter, Depends

from api.deps import get_auth_service
from api.schemas.auth import RegisterRequest, SigninRequest, TokenResponse
from paperpilot.errors import UpstreamError, ValidationError
from paperpilot.service.auth_service import AuthService

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=TokenResponse, status_code=201)
def register(
    body: RegisterRequest,
    auth: AuthService = Depends(get_auth_service),
):
    """Create an account with an empty interest set and return a token."""
    try:
        token = auth.register(
            email=body.email,
            password=body.password,
            name=body.name,
            expertise=body.expertise,
        )
    except UpstreamError:
        raise ValidationError("Registration failed")
    return TokenResponse(token=token)


@router.post("/signin", response_model=TokenResponse)
def signin(
    body: SigninRequest,
    auth: AuthService = Depends(get_auth_service),
):
    token = auth.signin(email=body.email, password=body.password)
    return TokenResponse(token=token)
