"""Streaming multipart decoder with a cap on uploaded file bytes."""

from collections.abc import AsyncIterator
from dataclasses import dataclass, field

from starlette.datastructures import FormData, Headers, UploadFile
from starlette.formparsers import MultiPartException, MultiPartParser

from voicemail_service.domain import AudioUpload


class CappedMultiPartParser(MultiPartParser):
    """Multipart parser that aborts once file parts exceed ``max_file_size`` bytes."""

    def __init__(
        self,
        headers: Headers,
        stream: AsyncIterator[bytes],
        *,
        max_file_size: int,
        **kwargs,
    ):
        super().__init__(headers, stream, **kwargs)
        self.max_file_size = max_file_size
        self._file_bytes = 0

    def on_part_data(self, data: bytes, start: int, end: int) -> None:
        if self._current_part.file is not None:
            self._file_bytes += end - start
            if self._file_bytes > self.max_file_size:
                raise MultiPartException(
                    f"Uploaded file exceeded maximum size of {self.max_file_size} bytes."
                )
        super().on_part_data(data, start, end)


@dataclass
class DecodedForm:
    """Text fields and file parts decoded from a multipart body.

    A field name may repeat, so every file field maps to a list of parts.
    """

    fields: dict[str, str] = field(default_factory=dict)
    files: dict[str, list[AudioUpload]] = field(default_factory=dict)
    _form: FormData | None = field(default=None, repr=False)

    def first_file(self, name: str) -> AudioUpload | None:
        parts = self.files.get(name)
        return parts[0] if parts else None

    async def aclose(self) -> None:
        if self._form is not None:
            await self._form.close()


async def decode_form(
    headers: Headers,
    stream: AsyncIterator[bytes],
    max_file_size: int,
) -> DecodedForm:
    """
    Decodes a ``multipart/form-data`` body from a not yet consumed stream.

    Args:
        headers: The request headers, used for the content type and boundary.
        stream: The raw request body stream.
        max_file_size: Maximum total bytes accepted across file parts.

    Returns:
        DecodedForm with the text fields and file parts.

    Raises:
        MultiPartException: If the body is not multipart, is malformed,
            or its files exceed ``max_file_size``.
    """
    content_type = headers.get("content-type", "")
    if not content_type.lower().startswith("multipart/form-data"):
        raise MultiPartException(
            f"Expected multipart/form-data body, got '{content_type or 'none'}'."
        )

    parser = CappedMultiPartParser(headers, stream, max_file_size=max_file_size)
    form = await parser.parse()

    decoded = DecodedForm(_form=form)
    for key, value in form.multi_items():
        if isinstance(value, UploadFile):
            decoded.files.setdefault(key, []).append(
                AudioUpload(
                    field_name=key,
                    filename=value.filename,
                    content_type=value.content_type,
                    file=value.file,
                )
            )
        else:
            decoded.fields.setdefault(key, value)
    return decoded
