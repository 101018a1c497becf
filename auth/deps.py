import logging

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from auth.identity import verify_identity_token
from db.database import get_db
from errors import AuthenticationError
from models.user import User
from services.user_service import bootstrap

logger = logging.getLogger("garden.auth")

# ヘッダが無い時も AuthenticationError (401) で返したいので auto_error=False
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    if credentials is None:
        raise AuthenticationError("Missing bearer token")

    try:
        identity = verify_identity_token(credentials.credentials)
    except AuthenticationError as e:
        logger.warning("rejected identity assertion: %s", e.message)
        raise

    # 初回ログイン時は自動作成
    return bootstrap(db, identity.subject, identity.name, identity.email)
