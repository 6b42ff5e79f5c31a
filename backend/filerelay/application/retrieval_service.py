"""
Retrieval Service

Looks up a registered file and opens the origin stream for it.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterator

from filerelay.domain.file_registry import FileRecord, FileRegistry
from filerelay.infrastructure.upstream_fetcher import UpstreamFetcher, UpstreamResponse

logger = logging.getLogger(__name__)


def build_download_headers(record: FileRecord) -> Dict[str, str]:
    """
    Headers sent to the caller for a relayed file.

    The stored name is used literally. Registration is the place to
    sanitize it; a name containing quotes or line breaks goes out as is.
    """
    return {
        "Content-Type": record.mime,
        "Content-Disposition": f'attachment; filename="{record.name}"',
    }


@dataclass
class FileDownload:
    """An opened origin stream together with the record it serves."""

    record: FileRecord
    upstream: UpstreamResponse

    @property
    def status_code(self) -> int:
        return self.upstream.status_code

    @property
    def headers(self) -> Dict[str, str]:
        return build_download_headers(self.record)

    def iter_bytes(self) -> Iterator[bytes]:
        return self.upstream.iter_bytes()

    def close(self) -> None:
        self.upstream.close()


class RetrievalService:
    """
    Application service for the retrieval path.

    Each call is independent: a failure ends that request only and no
    state is kept between calls.
    """

    def __init__(self, registry: FileRegistry, fetcher: UpstreamFetcher):
        self.registry = registry
        self.fetcher = fetcher

    def open_download(self, unique_id: str) -> FileDownload:
        """
        Resolve a unique id to a ready-to-stream download.

        The record is read before any upstream traffic, so a missing or
        incomplete record never reaches the origin.

        Raises:
            RecordNotFoundError: Unknown id or incomplete record
            StoreUnavailableError: Record store unreachable
            UpstreamFetchError: Origin request failed
        """
        record = self.registry.lookup(unique_id)
        upstream = self.fetcher.fetch(record.token, record.path)
        return FileDownload(record=record, upstream=upstream)
