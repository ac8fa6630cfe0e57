"""Report store - writes finished reports into the report directory."""

from __future__ import annotations

import logging
from contextlib import suppress
from datetime import datetime
from pathlib import Path

from kubereport.constants.values import REPORT_FILE_EXTENSION, REPORT_TIMESTAMP_FORMAT
from kubereport.report.errors import StoreError

logger = logging.getLogger(__name__)


def report_file_name(kind_label: str, scope: str, generated_at: datetime, suffix: int = 0) -> str:
    """Build ``<Kind>-<scope>-<MM-DD-YYYY_HH-MM-SS>.pdf``.

    A non-zero suffix is inserted before the extension to resolve collisions.
    """
    stem = f"{kind_label}-{scope}-{generated_at.strftime(REPORT_TIMESTAMP_FORMAT)}"
    if suffix:
        stem = f"{stem}-{suffix}"
    return f"{stem}{REPORT_FILE_EXTENSION}"


class ReportStore:
    """Directory of finished report files. Files are never overwritten."""

    _MAX_NAME_ATTEMPTS = 100

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def write(self, kind_label: str, scope: str, generated_at: datetime, content: bytes) -> str:
        """Write one report and return its file name.

        Raises:
            StoreError: when the directory cannot be created or the file
                cannot be written.
        """
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreError(f"cannot create report directory {self.directory}: {exc}") from exc

        for suffix in range(self._MAX_NAME_ATTEMPTS):
            file_name = report_file_name(kind_label, scope, generated_at, suffix)
            path = self.directory / file_name
            try:
                with open(path, "xb") as handle:
                    handle.write(content)
            except FileExistsError:
                continue
            except OSError as exc:
                with suppress(OSError):
                    path.unlink(missing_ok=True)
                raise StoreError(f"cannot write report {path}: {exc}") from exc
            logger.info("Wrote report %s (%d bytes)", path, len(content))
            return file_name

        raise StoreError(
            f"no free report file name for {kind_label}-{scope} in {self.directory}"
        )
