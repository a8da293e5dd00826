from __future__ import annotations

from typing import Optional


def normalize_prefix(prefix: Optional[str]) -> str:
    """Return ``prefix`` as ``/segment[/segment...]``, or ``""`` when blank.

    Empty segments are dropped, so ``"api//v1/"`` becomes ``"/api/v1"``.
    """
    if prefix is None:
        return ""
    segments = [segment.strip() for segment in prefix.split("/")]
    segments = [segment for segment in segments if segment]
    if not segments:
        return ""
    return "/" + "/".join(segments)
