# streamprobe/services/api/routers/media_streams.py
from __future__ import annotations

from http import HTTPStatus
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from streamprobe.common.logging import get_logger
from streamprobe.common.path.safe import safe_join
from streamprobe.common.settings import get_settings
from streamprobe.domain.enums import StreamKind
from streamprobe.domain.errors import ProbeError, ProbeTimeoutError, UnsupportedCodecError
from streamprobe.domain.ports.probe import MediaProbePort
from streamprobe.services.api.deps import get_media_probe
from streamprobe.services.mappers.media_file import to_media_file_read
from streamprobe.services.probe.media_file_service import load_media_file
from streamprobe.services.schemas.media_file import MediaFileRead

logger = get_logger()
router = APIRouter(prefix="/media", tags=["media"])


@router.get("/streams", response_model=MediaFileRead)
def get_media_streams(
    path: str = Query(..., min_length=1, description="File path relative to the media root"),
    kind: Optional[StreamKind] = Query(None, description="Only return streams of this kind"),
    prober: MediaProbePort = Depends(get_media_probe),
):
    cfg = get_settings()
    try:
        abs_path = safe_join(cfg.media_root, path)
    except ValueError as e:
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=str(e))

    if not abs_path.is_file():
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=f"File not found: {path}")

    try:
        media = load_media_file(abs_path, prober=prober)
    except UnsupportedCodecError as e:
        raise HTTPException(status_code=HTTPStatus.UNPROCESSABLE_ENTITY, detail=str(e))
    except ProbeTimeoutError as e:
        raise HTTPException(status_code=HTTPStatus.GATEWAY_TIMEOUT, detail=str(e))
    except ProbeError as e:
        logger.warning("Probe failed for %s: %s (rc=%s)", abs_path, e, e.rc)
        raise HTTPException(status_code=HTTPStatus.BAD_GATEWAY, detail=str(e))

    return to_media_file_read(media, kind)
