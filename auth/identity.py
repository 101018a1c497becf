"""Identity assertion verification and dev-token helpers."""

import time
from dataclasses import dataclass

from jose import jwt, JWTError

import config
from errors import AuthenticationError


@dataclass
class Identity:
    subject: str
    name: str | None
    email: str | None


def verify_identity_token(raw_token: str | None) -> Identity:
    """
    IdP が発行した HS256 アサーションを検証して (sub, name, email) を取り出す
    aud は IDENTITY_JWT_AUDIENCE が設定されている時だけ検証する
    """
    token = (raw_token or "").strip()
    if not token:
        raise AuthenticationError("Token is required")
    if not config.IDENTITY_JWT_SECRET:
        raise AuthenticationError("Sign-in is not configured")

    try:
        payload = jwt.decode(
            token,
            config.IDENTITY_JWT_SECRET,
            algorithms=[config.IDENTITY_JWT_ALGORITHM],
            audience=config.IDENTITY_JWT_AUDIENCE,
            options={"verify_aud": config.IDENTITY_JWT_AUDIENCE is not None},
        )
    except JWTError as e:
        raise AuthenticationError(f"Invalid token: {e}")

    subject = str(payload.get("sub") or "").strip()
    if not subject:
        raise AuthenticationError("Invalid token: missing subject claim")

    return Identity(
        subject=subject,
        name=payload.get("name"),
        email=payload.get("email"),
    )


def create_identity_token(
    subject: str,
    name: str | None = None,
    email: str | None = None,
    expires_in: int = 60 * 60 * 24,
) -> str:
    """開発・テスト用のアサーションを発行する"""
    if not config.IDENTITY_JWT_SECRET:
        raise RuntimeError("IDENTITY_JWT_SECRET is not set in environment variables")

    payload = {
        "sub": subject,
        "name": name,
        "email": email,
        "exp": int(time.time()) + expires_in,
    }
    if config.IDENTITY_JWT_AUDIENCE:
        payload["aud"] = config.IDENTITY_JWT_AUDIENCE
    return jwt.encode(payload, config.IDENTITY_JWT_SECRET, algorithm=config.IDENTITY_JWT_ALGORITHM)
