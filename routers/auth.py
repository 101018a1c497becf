from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from auth.deps import get_current_user
from auth.identity import verify_identity_token
from db.database import get_db
from errors import ValidationError
from models.user import User
from schemas.user import LoginRequest, LoginResponse, UserResponse
from services.user_service import bootstrap

router = APIRouter(tags=["Auth"])


@router.post("/login", response_model=LoginResponse)
def login(body: LoginRequest, db: Session = Depends(get_db)):
    """
    IdP のトークンを受け取り、検証してユーザーを返す（初回は作成）
    """
    if not body.token:
        raise ValidationError("Token is required")

    identity = verify_identity_token(body.token)
    user = bootstrap(db, identity.subject, identity.name, identity.email)
    return {"message": "User authenticated", "user": user}


@router.get("/auth/me", response_model=UserResponse)
def get_me(user: User = Depends(get_current_user)):
    """現在ログイン中のユーザー情報を返す"""
    return user
