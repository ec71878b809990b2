"""Basic auth for API routes."""

import secrets

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials


REALM = "url-shortener"

security = HTTPBasic(realm=REALM)


def require_basic_auth(
    request: Request,
    credentials: HTTPBasicCredentials = Depends(security),
) -> str:
    """Check request credentials against the configured HTTP server user.

    Returns:
        The authenticated user name

    Raises:
        HTTPException: 401 if the credentials do not match
    """
    server = request.app.state.config.http_server

    user_ok = secrets.compare_digest(
        credentials.username.encode("utf-8"),
        server.user.encode("utf-8"),
    )
    password_ok = secrets.compare_digest(
        credentials.password.encode("utf-8"),
        server.password.get_secret_value().encode("utf-8"),
    )

    if not (user_ok and password_ok):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": f'Basic realm="{REALM}"'},
        )

    return credentials.username
