from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path


@runtime_checkable
class SourceRepositoryPort(Protocol):
    pass

    def read_text(self, file_path: str | Path, encoding: str) -> str: ...

    def read_bytes(self, file_path: str | Path) -> bytes: ...
