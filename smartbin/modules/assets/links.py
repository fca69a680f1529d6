"""Forced-download URLs and the staggered download plan for the bin download page.

Media host URLs look like ``https://res.cloudinary.com/<cloud>/video/upload/v1234/<id>.mp4``.
Inserting ``fl_attachment`` right after ``/upload/`` makes the host answer with
``Content-Disposition: attachment``. URLs without the marker are returned untouched.
"""
from dataclasses import dataclass
from typing import Iterable

UPLOAD_MARKER = "/upload/"
ATTACHMENT_FLAG = "fl_attachment/"

DEFAULT_STAGGER_MS = 3000
DEFAULT_SETTLE_MS = 2000

def to_download_url(url: str) -> str:
    # Not idempotent: a URL that already carries the flag gets it a second time.
    if UPLOAD_MARKER in url:
        return url.replace(UPLOAD_MARKER, UPLOAD_MARKER + ATTACHMENT_FLAG, 1)
    return url

@dataclass(frozen=True)
class ScheduledDownload:
    index: int  # 1-based
    url: str
    download_url: str
    filename: str
    delay_ms: int

def build_staggered_download_sequence(urls: Iterable[str], delay_ms: int = DEFAULT_STAGGER_MS) -> list[ScheduledDownload]:
    if delay_ms < 0:
        raise ValueError("delay_ms must be >= 0")
    return [
        ScheduledDownload(
            index=i + 1,
            url=url,
            download_url=to_download_url(url),
            filename=f"video_{i + 1}.mp4",
            delay_ms=i * delay_ms,
        )
        for i, url in enumerate(urls)
    ]

def completion_offset_ms(plan: list[ScheduledDownload], delay_ms: int = DEFAULT_STAGGER_MS, settle_ms: int = DEFAULT_SETTLE_MS) -> int:
    """When the page flips its status to 'complete'; purely cosmetic, downloads may still be running."""
    return len(plan) * delay_ms + settle_ms
