"""Turn fetched repository contents (or a failure) into tool results.

Every tool answers with a CallToolResult holding one text block; failures
set isError instead of raising.
"""

from __future__ import annotations

import base64
import binascii
import json

from mcp.types import CallToolResult, TextContent

from core.models import DirectoryListing, FileContent, RepoRef, SingleEntry
from core.paths import file_extension

BINARY_EXTENSIONS = frozenset(
    {
        # images
        "jpg", "jpeg", "png", "gif", "bmp", "ico", "webp",
        # audio / video
        "mp3", "mp4", "wav", "ogg",
        # documents, archives, executables
        "pdf", "zip", "tar", "gz", "rar", "exe", "dll", "so", "bin",
    }
)


def text_result(text: str, *, is_error: bool = False) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=text)],
        isError=is_error,
    )


def listing_result(title: str, listing: DirectoryListing) -> CallToolResult:
    items = [entry.as_dict() for entry in listing.entries]
    return text_result(f"{title}:\n\n{json.dumps(items, indent=2)}")


def is_binary_path(path: str) -> bool:
    return file_extension(path) in BINARY_EXTENSIONS


def decode_content(entry: SingleEntry) -> FileContent:
    """Decode file content as reported by the contents API.

    base64 is decoded to UTF-8 (invalid bytes replaced); any other
    encoding is passed through as-is. Missing or malformed content
    yields empty text.
    """
    raw = entry.content or ""
    if not raw:
        return FileContent(path=entry.path)

    if entry.encoding == "base64":
        try:
            data = base64.b64decode(raw)
        except (binascii.Error, ValueError):
            return FileContent(path=entry.path)
        return FileContent(path=entry.path, text=data.decode("utf-8", errors="replace"))

    return FileContent(path=entry.path, text=raw)


def binary_notice(path: str) -> str:
    return f"File {path} appears to be a binary file and cannot be displayed as text."


def file_result(repo: RepoRef, path: str, entry: SingleEntry) -> CallToolResult:
    # Binary files are reported without decoding their payload.
    if is_binary_path(path):
        return text_result(binary_notice(path))

    content = decode_content(entry)
    return text_result(f"File content for {path} in {repo.full_name}:\n\n{content.text}")


def error_message(err: BaseException) -> str:
    return str(err) or type(err).__name__


def error_result(action: str, err: BaseException) -> CallToolResult:
    return text_result(f"Error {action}: {error_message(err)}", is_error=True)
