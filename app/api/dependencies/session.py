"""Session cookie handling and the current-account dependency."""

from datetime import datetime, timedelta, timezone
from typing import Annotated, Optional

import jwt
from fastapi import Depends, Request

from infrastructure.logging import get_module_logger
from infrastructure.services import EntityStorageDep, SettingsDep, get_settings
from modules.og.domain import Account, AccessDeniedError, EntityNotFoundError

logger = get_module_logger()

ALGORITHM = "HS256"


def create_session_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    """
    Sign a session token for an account.

    Args:
        user_id (int): The account id stored in the "sub" claim.
        expires_delta (Optional[timedelta]): Token lifetime. Defaults to
            SESSION_MAX_AGE_MINUTES.

    Returns:
        str: The encoded JWT.

    Raises:
        ValueError: If expires_delta is negative.
    """
    server = get_settings().server
    if expires_delta and expires_delta.total_seconds() < 0:
        raise ValueError("expires_delta cannot be negative")
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=server.SESSION_MAX_AGE_MINUTES)
    )
    return jwt.encode(
        {"sub": str(user_id), "exp": expire}, server.SECRET_KEY, algorithm=ALGORITHM
    )


def read_session_user_id(token: str, secret: str) -> Optional[int]:
    """Return the account id of a valid session token, None otherwise."""
    try:
        payload = jwt.decode(token, secret, algorithms=[ALGORITHM])
    except jwt.PyJWTError as e:
        logger.warning("session_token_invalid", error=str(e))
        return None
    subject = payload.get("sub")
    if subject is None or not str(subject).isdigit():
        logger.warning("session_token_subject_invalid")
        return None
    return int(subject)


def get_current_account(
    request: Request, settings: SettingsDep, storage: EntityStorageDep
) -> Account:
    """
    Resolve the viewing account from the session cookie.

    Missing, expired or tampered cookies, and sessions of deleted accounts,
    all resolve to the anonymous account.
    """
    token = request.cookies.get(settings.server.SESSION_COOKIE_NAME)
    if not token:
        return Account.anonymous()
    user_id = read_session_user_id(token, settings.server.SECRET_KEY)
    if user_id is None:
        return Account.anonymous()
    try:
        return storage.load_account(user_id)
    except EntityNotFoundError:
        logger.warning("session_account_missing", user_id=user_id)
        return Account.anonymous()


CurrentAccountDep = Annotated[Account, Depends(get_current_account)]


def require_permission(account: Account, permission: str) -> None:
    """
    Raises:
        AccessDeniedError: If the account lacks the site permission.
    """
    if not account.has_permission(permission):
        raise AccessDeniedError(permission)
