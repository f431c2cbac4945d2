"""Translation of domain and adapter errors into HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from tkchat.adapter.error import (
    AccountExistsError,
    IdentityServiceError,
    InvalidCredentialsError,
)
from tkchat.application.usecase.invite.links import build_invite_url
from tkchat.config import Settings
from tkchat.domain.error import (
    AccountInactiveError,
    AlreadyRegisteredError,
    DomainError,
    DuplicateInviteError,
    NotFoundError,
    UnauthorizedError,
    WeakPasswordError,
)


def _status_for(exc: DomainError) -> int:
    if isinstance(exc, (UnauthorizedError, AccountInactiveError)):
        return status.HTTP_403_FORBIDDEN
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, (DuplicateInviteError, AlreadyRegisteredError)):
        return status.HTTP_409_CONFLICT
    return status.HTTP_400_BAD_REQUEST


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Install exception handlers mapping the error taxonomy to statuses.

    Args:
        app: FastAPI application
        settings: Application settings, for links in conflict responses
    """

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        code = _status_for(exc)
        content: dict = {"detail": str(exc), "error": type(exc).__name__}

        if isinstance(exc, DuplicateInviteError):
            content["invite_url"] = build_invite_url(
                settings.api.frontend_url, exc.invite
            )
            content["expires_at"] = exc.invite.expires_at.isoformat()
        elif isinstance(exc, WeakPasswordError):
            content["unmet"] = exc.unmet

        logfire.info(
            "Request rejected",
            path=request.url.path,
            error=type(exc).__name__,
            status_code=code,
        )
        return JSONResponse(status_code=code, content=content)

    @app.exception_handler(PydanticValidationError)
    async def validation_error_handler(
        request: Request, exc: PydanticValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": "Invalid input",
                "error": "ValidationError",
                "errors": [
                    {"loc": list(err["loc"]), "msg": err["msg"]} for err in exc.errors()
                ],
            },
        )

    @app.exception_handler(IdentityServiceError)
    async def identity_error_handler(
        request: Request, exc: IdentityServiceError
    ) -> JSONResponse:
        if isinstance(exc, InvalidCredentialsError):
            code = status.HTTP_401_UNAUTHORIZED
        elif isinstance(exc, AccountExistsError):
            code = status.HTTP_409_CONFLICT
        else:
            logfire.error(
                "Identity service failure", path=request.url.path, error=str(exc)
            )
            code = status.HTTP_502_BAD_GATEWAY
        return JSONResponse(
            status_code=code,
            content={"detail": str(exc), "error": type(exc).__name__},
        )
