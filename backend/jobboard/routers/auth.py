from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from jobboard.config import settings
from jobboard.database import get_db
from jobboard.dependencies import get_current_identity
from jobboard.models.account import Account
from jobboard.schemas.auth import (
    AccountResponse,
    Identity,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
)
from jobboard.services import account_service
from jobboard.utils.security import issue_token

router = APIRouter(prefix="/auth", tags=["auth"])


def _account_to_response(account: Account) -> AccountResponse:
    return AccountResponse(
        id=account.id,
        email=account.email,
        user_type=account.role,
        first_name=account.first_name,
        last_name=account.last_name,
        country=account.country,
    )


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(req: RegisterRequest, db: Session = Depends(get_db)):
    account = account_service.register(db, req)
    return RegisterResponse(
        message="User registered successfully",
        user=_account_to_response(account),
    )


@router.post("/login", response_model=AccountResponse)
async def login(req: LoginRequest, response: Response, db: Session = Depends(get_db)):
    account = account_service.authenticate(db, req.email, req.password)
    response.set_cookie(
        key=settings.cookie_name,
        value=issue_token(account.id, account.role),
        max_age=settings.token_ttl_seconds,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )
    return _account_to_response(account)


@router.post("/logout")
async def logout(response: Response):
    response.delete_cookie(key=settings.cookie_name)
    return {"message": "Logged out"}


@router.get("/me", response_model=AccountResponse)
async def me(identity: Identity = Depends(get_current_identity), db: Session = Depends(get_db)):
    account = account_service.get_account(db, identity.subject_id)
    return _account_to_response(account)
