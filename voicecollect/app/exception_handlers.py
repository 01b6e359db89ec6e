"""Translate domain and store errors into JSON responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from voicecollect.database.exceptions import (
    EmailAlreadyRegisteredError,
    RecordingNotFoundError,
    SpeakerNotFoundError,
    StoreUnavailableError,
)
from voicecollect.domain_service.exceptions import (
    InvalidCredentialsError,
    InvalidRecordingError,
    PhraseGenerationError,
    RegistrationFailedError,
)

logger = logging.getLogger(__name__)


def _detail(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})


async def not_found_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert missing speakers and recordings to 404."""
    assert isinstance(exc, (SpeakerNotFoundError, RecordingNotFoundError))
    return _detail(status.HTTP_404_NOT_FOUND, str(exc))


async def email_conflict_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    assert isinstance(exc, EmailAlreadyRegisteredError)
    return _detail(status.HTTP_409_CONFLICT, str(exc))


async def invalid_credentials_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    assert isinstance(exc, InvalidCredentialsError)
    return _detail(status.HTTP_401_UNAUTHORIZED, str(exc))


async def registration_failed_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Return the generic retry message; the cause stays in the logs."""
    assert isinstance(exc, RegistrationFailedError)
    return _detail(status.HTTP_503_SERVICE_UNAVAILABLE, str(exc))


async def store_unavailable_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    assert isinstance(exc, StoreUnavailableError)
    logger.error(f"Store unavailable during {request.method} {request.url.path}")
    return _detail(
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "Service temporarily unavailable, please try again",
    )


async def invalid_recording_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    assert isinstance(exc, InvalidRecordingError)
    return _detail(status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc))


async def phrase_generation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    assert isinstance(exc, PhraseGenerationError)
    return _detail(status.HTTP_502_BAD_GATEWAY, str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to the application."""
    app.add_exception_handler(SpeakerNotFoundError, not_found_exception_handler)
    app.add_exception_handler(RecordingNotFoundError, not_found_exception_handler)
    app.add_exception_handler(
        EmailAlreadyRegisteredError, email_conflict_exception_handler
    )
    app.add_exception_handler(
        InvalidCredentialsError, invalid_credentials_exception_handler
    )
    app.add_exception_handler(
        RegistrationFailedError, registration_failed_exception_handler
    )
    app.add_exception_handler(
        StoreUnavailableError, store_unavailable_exception_handler
    )
    app.add_exception_handler(
        InvalidRecordingError, invalid_recording_exception_handler
    )
    app.add_exception_handler(
        PhraseGenerationError, phrase_generation_exception_handler
    )
