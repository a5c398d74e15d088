from fastapi import Request, HTTPException, status


async def get_bearer_token(request: Request) -> str:
    """
    FastAPI dependency — extracts the Bearer token from the Authorization
    header. Session validity is checked by the log storage backend, which
    receives the same token.
    Raises HTTP 401 if the header is missing or malformed.
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid Authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = auth_header.split(" ", 1)[1].strip()
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Empty bearer token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return token
