"""Authentication endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.core.dependencies import get_db, get_token_service
from postboard.core.exceptions import AuthenticationError, ConflictError
from postboard.core.security import TokenService
from postboard.schemas.auth import LoginRequest, LoginResponse, RegisterRequest
from postboard.services import auth as auth_service
from postboard.services.auth import AuthResult

router = APIRouter(prefix="/auth", tags=["auth"])


def _to_response(result: AuthResult) -> LoginResponse:
    return LoginResponse(
        token=result.token,
        username=result.user.username,
        email=result.user.email,
        role=result.user.role,
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    payload: LoginRequest,
    session: AsyncSession = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> LoginResponse:
    try:
        result = await auth_service.login(session, payload.username, payload.password, tokens=tokens)
    except AuthenticationError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)) from exc
    return _to_response(result)


@router.post("/register", response_model=LoginResponse)
async def register(
    payload: RegisterRequest,
    session: AsyncSession = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> LoginResponse:
    try:
        result = await auth_service.register(
            session,
            username=payload.username,
            password=payload.password,
            email=payload.email,
            full_name=payload.full_name,
            tokens=tokens,
        )
    except ConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return _to_response(result)
