from __future__ import annotations

import asyncio

import pytest
from starlette.datastructures import Headers
from starlette.formparsers import MultiPartException

from voicemail_service.infrastructure import decode_form

BOUNDARY = "voicemailboundary"
HEADERS = Headers({"content-type": f"multipart/form-data; boundary={BOUNDARY}"})


def _body(*parts: bytes) -> bytes:
    return b"".join(parts) + f"--{BOUNDARY}--\r\n".encode()


def _field(name: str, value: str) -> bytes:
    return (
        f"--{BOUNDARY}\r\n"
        f'Content-Disposition: form-data; name="{name}"\r\n\r\n'
        f"{value}\r\n"
    ).encode()


def _file(name: str, filename: str, content: bytes, mime: str = "audio/webm") -> bytes:
    return (
        f"--{BOUNDARY}\r\n"
        f'Content-Disposition: form-data; name="{name}"; filename="{filename}"\r\n'
        f"Content-Type: {mime}\r\n\r\n"
    ).encode() + content + b"\r\n"


async def _chunks(data: bytes, size: int = 64):
    for i in range(0, len(data), size):
        yield data[i : i + size]
    yield b""


def _decode(body: bytes, max_file_size: int = 1024, headers: Headers = HEADERS):
    async def run():
        form = await decode_form(headers, _chunks(body), max_file_size)
        try:
            audio = form.first_file("audio")
            content = audio.read() if audio else None
            return form, audio, content
        finally:
            await form.aclose()

    return asyncio.run(run())


def test_decodes_fields_and_audio() -> None:
    body = _body(_field("name", "Jane"), _file("audio", "v.ogg", b"OggS" * 10, "audio/ogg"))

    form, audio, content = _decode(body)

    assert form.fields == {"name": "Jane"}
    assert list(form.files) == ["audio"]
    assert audio.filename == "v.ogg"
    assert audio.content_type == "audio/ogg"
    assert content == b"OggS" * 10


def test_first_file_is_none_without_audio() -> None:
    form, audio, _ = _decode(_body(_field("name", "Jane")))

    assert audio is None
    assert form.files == {}


def test_file_over_cap_aborts_stream() -> None:
    consumed: list[bytes] = []
    body = _body(_file("audio", "big.webm", b"x" * 4096))

    async def tracking_chunks():
        async for chunk in _chunks(body):
            consumed.append(chunk)
            yield chunk

    async def run():
        await decode_form(HEADERS, tracking_chunks(), 1024)

    with pytest.raises(MultiPartException, match="maximum size"):
        asyncio.run(run())
    assert sum(len(c) for c in consumed) < len(body)


def test_text_fields_do_not_count_towards_cap() -> None:
    body = _body(_field("message", "m" * 2000), _file("audio", "v.webm", b"a" * 100))

    form, _, content = _decode(body, max_file_size=512)

    assert len(form.fields["message"]) == 2000
    assert content == b"a" * 100


def test_rejects_non_multipart_content_type() -> None:
    with pytest.raises(MultiPartException, match="multipart/form-data"):
        _decode(b"{}", headers=Headers({"content-type": "application/json"}))


def test_rejects_missing_boundary() -> None:
    with pytest.raises(MultiPartException):
        _decode(b"", headers=Headers({"content-type": "multipart/form-data"}))
