"""Voicemail submission endpoint."""

import io
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from voicemail_service.config import MESSAGE_MAX_LENGTH, NAME_MAX_LENGTH, AppConfig
from voicemail_service.dependencies import (
    ConfigDep,
    NotifierFactory,
    StorageFactory,
    get_notifier_factory,
    get_storage_factory,
)
from voicemail_service.domain import (
    DEFAULT_MIME_TYPE,
    NotificationResult,
    StoredObject,
    Submission,
    build_object_name,
    clean_text,
    compose_notification,
)
from voicemail_service.exceptions import StageError, StorageUploadError
from voicemail_service.infrastructure import DecodedForm, decode_form
from voicemail_service.interfaces import StorageClient
from voicemail_service.logging import setup_logging
from voicemail_service.response_models import ErrorResponse, VoicemailResponse
from voicemail_service.utils import describe_error

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["voicemail"])

VOICEMAIL_PATH = "/api/voicemail"

StorageFactoryDep = Annotated[StorageFactory, Depends(get_storage_factory)]
NotifierFactoryDep = Annotated[NotifierFactory, Depends(get_notifier_factory)]


@router.post(
    "/voicemail",
    response_model=VoicemailResponse,
    responses={
        400: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def submit_voicemail(
    request: Request,
    config: ConfigDep,
    storage_factory: StorageFactoryDep,
    notifier_factory: NotifierFactoryDep,
) -> JSONResponse:
    """
    Accepts a voicemail recording with optional name and message.

    Stores the audio in object storage and emails the operator a link to it.
    A failed email is reported in the response but does not fail the request.
    Other methods are answered by ``method_not_allowed_handler``.
    """
    try:
        if not (config.has_resend and config.has_blob):
            raise StageError(
                500,
                "env-check",
                "Missing required env var(s).",
                {"hasResend": config.has_resend, "hasBlob": config.has_blob},
            )

        try:
            storage = storage_factory(config)
        except Exception as e:
            raise StageError(500, "storage.client", e) from e

        form = await _decode(request, config.max_audio_bytes)
        try:
            return await _process(form, config, storage, notifier_factory)
        finally:
            await form.aclose()
    except StageError as e:
        return _failure(e)
    except Exception as e:
        return _failure(StageError(500, "handler-top", e))


async def method_not_allowed_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """Answers wrong methods on the voicemail endpoint with the JSON rejection body."""
    if exc.status_code == 405 and request.url.path.rstrip("/") == VOICEMAIL_PATH:
        response = _failure(StageError(405, "method-check", "Use POST"))
        response.headers["Allow"] = "POST"
        return response
    return await http_exception_handler(request, exc)


async def _decode(request: Request, max_file_size: int) -> DecodedForm:
    try:
        return await decode_form(request.headers, request.stream(), max_file_size)
    except MultiPartException as e:
        raise StageError(400, "multipart.parse", e) from e
    except Exception as e:
        raise StageError(500, "multipart.parse", e) from e


async def _process(
    form: DecodedForm,
    config: AppConfig,
    storage: StorageClient,
    notifier_factory: NotifierFactory,
) -> JSONResponse:
    audio = form.first_file("audio")
    if audio is None:
        raise StageError(
            400,
            "no-audio",
            "No audio file found in form-data field 'audio'.",
            {"fields": list(form.fields), "fileKeys": list(form.files)},
        )

    submission = Submission(
        name=clean_text(form.fields.get("name"), NAME_MAX_LENGTH),
        message=clean_text(form.fields.get("message"), MESSAGE_MAX_LENGTH),
        audio=audio,
    )
    mime_type = audio.content_type or DEFAULT_MIME_TYPE

    try:
        data = await run_in_threadpool(audio.read)
    except OSError as e:
        raise StageError(500, "read-upload-tempfile", e) from e

    if not data:
        raise StageError(
            400,
            "no-audio",
            "Audio file in form-data field 'audio' is empty.",
            {"fields": list(form.fields), "fileKeys": list(form.files)},
        )

    object_name = build_object_name(mime_type)

    logger.info(
        "Received voicemail",
        extra={
            "object_name": object_name,
            "file_name": audio.filename,
            "content_type": mime_type,
            "size": len(data),
        },
    )

    try:
        url = await run_in_threadpool(
            storage.upload, object_name, io.BytesIO(data), len(data), mime_type
        )
    except StorageUploadError as e:
        raise StageError(500, "storage.put", e) from e

    stored = StoredObject(key=object_name, url=url, content_type=mime_type)
    result = await _notify(notifier_factory, submission, stored, config)

    body = VoicemailResponse(
        url=stored.url,
        filename=stored.key,
        email_ok=result.delivered,
        email_error=result.error_detail,
    )
    return JSONResponse(status_code=200, content=body.model_dump(by_alias=True))


async def _notify(
    notifier_factory: NotifierFactory,
    submission: Submission,
    stored: StoredObject,
    config: AppConfig,
) -> NotificationResult:
    email = compose_notification(submission, stored, config.notification)
    try:
        with notifier_factory(config) as notifier:
            await run_in_threadpool(notifier.send, email)
    except Exception as e:
        # The recording is already stored, so a failed email is reported, not raised.
        logger.exception(
            "Notification failed",
            extra={"object_name": stored.key},
        )
        return NotificationResult(delivered=False, error_detail=str(e) or repr(e))
    return NotificationResult(delivered=True)


def _failure(error: StageError) -> JSONResponse:
    detail = describe_error(error.error)
    extra: dict[str, Any] = {"where": error.where, **error.extra}
    if error.status_code >= 500:
        exc_info = error.error if isinstance(error.error, BaseException) else None
        logger.error("Voicemail request failed", extra=extra, exc_info=exc_info)
    else:
        logger.warning("Voicemail request rejected", extra=extra)

    body = ErrorResponse(where=error.where, error=detail, **error.extra)
    return JSONResponse(status_code=error.status_code, content=body.model_dump())
