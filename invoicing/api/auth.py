# invoicing/api/auth.py

from fastapi import APIRouter, Depends, status

from invoicing.api.deps import get_auth_service, get_current_claims
from invoicing.core.security import TokenClaims
from invoicing.models.users import AuthResponse, LoginRequest, MeResponse, RegisterRequest
from invoicing.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterRequest,
    auth: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    return auth.register(str(payload.email), payload.password, payload.name)


@router.post("/login", response_model=AuthResponse)
def login(
    payload: LoginRequest,
    auth: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    return auth.login(str(payload.email), payload.password)


@router.get("/me", response_model=MeResponse)
def me(
    claims: TokenClaims = Depends(get_current_claims),
    auth: AuthService = Depends(get_auth_service),
) -> MeResponse:
    return MeResponse(user=auth.get_user(claims.user_id))
