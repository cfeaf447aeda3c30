"""Form data parsing: URL-encoded and multipart.

Implements ``MultiValueMapping`` so a parsed submission can be handed
straight to ``Form.validate()``. Any web framework's own multi-value form
object works as well; this module exists for callers that only have the
raw body and ``Content-Type`` header.

``python-multipart`` is an optional dependency (``pip install wren[forms]``).
URL-encoded forms use stdlib ``urllib.parse``, no extra dependency.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True, slots=True)
class UploadFile:
    """An uploaded file from a multipart form submission.

    Immutable metadata with the content held in memory as bytes
    (suitable for typical web uploads).
    """

    filename: str
    content_type: str
    size: int
    _content: bytes

    def read(self) -> bytes:
        """Return the file content as bytes."""
        return self._content

    def save(self, path: Path) -> None:
        """Write the file content to disk.

        Args:
            path: Destination file path. Parent directories must exist.
        """
        path.write_bytes(self._content)

    def __repr__(self) -> str:
        return f"UploadFile({self.filename!r}, {self.content_type!r}, {self.size} bytes)"


class FormData(Mapping[str, str]):
    """Immutable parsed form data.

    Implements ``Mapping[str, str]`` and the ``MultiValueMapping`` protocol.
    Holds both string field values and uploaded files.

    ``__getitem__`` returns the first value for a key (string fields only).
    ``get_list`` returns all values for a key.
    ``files`` provides access to uploaded files by field name.

    Usage::

        data = parse_form_data(body, content_type)
        if form.validate(data):
            avatar = data.files.get("avatar")  # UploadFile or None
    """

    __slots__ = ("_data", "_files")

    def __init__(
        self,
        data: dict[str, list[str]],
        files: dict[str, UploadFile] | None = None,
    ) -> None:
        object.__setattr__(self, "_data", data)
        object.__setattr__(self, "_files", files or {})

    @property
    def files(self) -> Mapping[str, UploadFile]:
        """Uploaded files by field name."""
        return self._files

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"FormData({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key* (checkboxes, multi-selects)."""
        return list(self._data.get(key, []))


def parse_form_data(body: bytes, content_type: str) -> FormData:
    """Parse a form body into FormData.

    Supports:
    - ``application/x-www-form-urlencoded`` (stdlib, no extra dependency)
    - ``multipart/form-data`` (requires ``python-multipart``)

    Args:
        body: Raw request body bytes.
        content_type: The Content-Type header value.

    Returns:
        Parsed FormData instance.

    Raises:
        ConfigurationError: If multipart parsing is needed but
            ``python-multipart`` is not installed.
        ValueError: If content type is not a supported form encoding.
    """
    ct_lower = content_type.lower().split(";")[0].strip()

    if ct_lower == "application/x-www-form-urlencoded":
        return _parse_urlencoded(body)

    if ct_lower == "multipart/form-data":
        return _parse_multipart(body, content_type)

    msg = f"Unsupported form content type: {content_type!r}"
    raise ValueError(msg)


def _parse_urlencoded(body: bytes) -> FormData:
    """Parse URL-encoded form data using stdlib."""
    from urllib.parse import parse_qs

    parsed = parse_qs(body.decode("utf-8"), keep_blank_values=True)
    return FormData(parsed)


def _parse_multipart(body: bytes, content_type: str) -> FormData:
    """Parse multipart form data using python-multipart.

    Raises ``ConfigurationError`` if ``python-multipart`` is not installed.
    """
    from wren.errors import ConfigurationError

    try:
        from multipart.multipart import MultipartParser, parse_options_header
    except ImportError:
        msg = (
            "Multipart form parsing requires the 'python-multipart' package. "
            "Install it with: pip install wren[forms]"
        )
        raise ConfigurationError(msg) from None

    _, options = parse_options_header(content_type.encode("latin-1"))
    boundary = options.get(b"boundary")
    if boundary is None:
        msg = "Multipart form data missing boundary parameter"
        raise ValueError(msg)

    collector = _PartCollector(parse_options_header)
    parser = MultipartParser(boundary, collector.callbacks())
    parser.write(body)
    parser.finalize()

    return FormData(collector.data, collector.files)


class _PartCollector:
    """Accumulates multipart parser callbacks into fields and files."""

    def __init__(self, parse_options_header: Any) -> None:
        self._parse_options_header = parse_options_header
        self.data: dict[str, list[str]] = {}
        self.files: dict[str, UploadFile] = {}
        self._headers: dict[str, str] = {}
        self._pending_header = ""
        self._body = bytearray()
        self._name: str | None = None
        self._filename: str | None = None

    def callbacks(self) -> dict[str, Any]:
        return {
            "on_part_begin": self.on_part_begin,
            "on_part_data": self.on_part_data,
            "on_part_end": self.on_part_end,
            "on_header_field": self.on_header_field,
            "on_header_value": self.on_header_value,
        }

    def on_part_begin(self) -> None:
        self._headers = {}
        self._body = bytearray()
        self._name = None
        self._filename = None

    def on_part_data(self, chunk: bytes, start: int, end: int) -> None:
        self._body.extend(chunk[start:end])

    def on_header_field(self, chunk: bytes, start: int, end: int) -> None:
        self._pending_header = chunk[start:end].decode("latin-1").lower()

    def on_header_value(self, chunk: bytes, start: int, end: int) -> None:
        value = chunk[start:end].decode("latin-1")
        self._headers[self._pending_header] = value
        if self._pending_header != "content-disposition":
            return

        _, params = self._parse_options_header(value.encode("latin-1"))
        name = params.get(b"name")
        if name is not None:
            self._name = name.decode("utf-8")
        filename = params.get(b"filename")
        if filename is not None:
            self._filename = filename.decode("utf-8")

    def on_part_end(self) -> None:
        if self._name is None:
            return

        if self._filename is None:
            value = self._body.decode("utf-8", errors="replace")
            self.data.setdefault(self._name, []).append(value)
            return

        content = bytes(self._body)
        self.files[self._name] = UploadFile(
            filename=self._filename,
            content_type=self._headers.get("content-type", "application/octet-stream"),
            size=len(content),
            _content=content,
        )
