from pathlib import Path

from ...exceptions import DataParseError, DataSourceNotFoundError


class SourceRepository:
    pass

    def read_text(self, file_path: str | Path, encoding: str = "utf-8") -> str:
        path = self._check_file(file_path)
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError as e:
            raise DataParseError(
                f"Encoding error reading {path}. Try a different encoding: {e}"
            ) from e
        except OSError as e:
            raise DataSourceNotFoundError(f"Unable to read {path}: {e}") from e

    def read_bytes(self, file_path: str | Path) -> bytes:
        path = self._check_file(file_path)
        try:
            return path.read_bytes()
        except OSError as e:
            raise DataSourceNotFoundError(f"Unable to read {path}: {e}") from e

    def _check_file(self, file_path: str | Path) -> Path:
        path = Path(file_path)
        if not path.exists():
            raise DataSourceNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise DataSourceNotFoundError(f"Not a file: {path}")
        return path
