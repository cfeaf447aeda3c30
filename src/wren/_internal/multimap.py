"""MultiValueMapping protocol and request-data access.

A structural protocol so validators can accept any multi-valued mapping
(``FormData`` or a framework's own form object) without coupling to the
concrete type. Plain dicts work too, as ``{"tags": ["a", "b"]}`` or
``{"title": "Hello"}``.
"""

from collections.abc import Iterator, Mapping, Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class MultiValueMapping(Protocol):
    """A read-only string mapping where keys can have multiple values.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.

    Structurally compatible with ``Mapping[str, str]`` plus ``get_list``.
    Defined with explicit dunder methods because Protocols cannot inherit
    from non-Protocol ABCs like ``Mapping``.
    """

    def __getitem__(self, key: str) -> str: ...
    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def __len__(self) -> int: ...
    def get(self, key: str, default: str | None = None) -> str | None: ...
    def get_list(self, key: str) -> list[str]: ...


# Anything a validator can read submitted values from
type RequestData = MultiValueMapping | Mapping[str, Sequence[str]] | Mapping[str, str]


def get_values(data: RequestData, key: str) -> list[str]:
    """Return every submitted string for *key*, in submission order.

    Missing keys give an empty list. A bare string value is treated as a
    single-item list rather than a sequence of characters.
    """
    if isinstance(data, MultiValueMapping):
        return data.get_list(key)
    raw = data.get(key)
    if raw is None:
        return []
    if isinstance(raw, str):
        return [raw]
    return [str(v) for v in raw]
