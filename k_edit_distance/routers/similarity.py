# 라우터 정의
# - POST /levenshtein      : 문자 단위 편집 거리
# - POST /k-edit-distance  : 자음 정규화 음절 거리 (0~1)
# - POST /normalize        : 음절별 자모 분해 결과

import logging

from fastapi import APIRouter, HTTPException

from ..core import config
from ..schemas.similarity import (
    KEditRequest,
    KEditResponse,
    LevenshteinResponse,
    NormalizeRequest,
    NormalizeResponse,
    NormalizedSyllable,
    PairRequest,
    SyllableDistance,
)
from ..service.jamo import graphemes, normalize
from ..service.levenshtein import levenshtein_distance
from ..service.phonetic import k_edit_distance, syllable_distances

router = APIRouter(tags=["similarity"])
logger = logging.getLogger(__name__)


def _check_length(*texts: str) -> None:
    limit = config.settings.max_text_length
    for text in texts:
        if len(text) > limit:
            raise HTTPException(
                status_code=422,
                detail=f"text too long: {len(text)} chars (limit {limit})",
            )


@router.post("/levenshtein", response_model=LevenshteinResponse, summary="문자 단위 편집 거리")
def levenshtein(req: PairRequest):
    _check_length(req.source, req.target)
    try:
        dist = levenshtein_distance(req.source, req.target)
    except Exception:
        logger.exception("/levenshtein failed")
        raise HTTPException(status_code=500, detail="levenshtein failed")
    return LevenshteinResponse(source=req.source, target=req.target, distance=dist)


@router.post("/k-edit-distance", response_model=KEditResponse, summary="자음 정규화 음절 거리")
def k_edit(req: KEditRequest):
    """
    0.0 = 정규화 후 동일, 1.0 = 가장 다름.
    details=true 면 음절 위치별 자모와 거리를 함께 반환.
    """
    _check_length(req.source, req.target)
    try:
        score = k_edit_distance(req.source, req.target)
        syllables = None
        if req.details:
            syllables = [SyllableDistance(**row) for row in syllable_distances(req.source, req.target)]
    except Exception:
        logger.exception("/k-edit-distance failed")
        raise HTTPException(status_code=500, detail="k-edit-distance failed")
    return KEditResponse(
        source=req.source,
        target=req.target,
        # float32 의 최단 표기 그대로 (0.16666667)
        score=float(str(score)),
        syllables=syllables,
    )


@router.post("/normalize", response_model=NormalizeResponse, summary="음절별 자모 정규화")
def normalize_text(req: NormalizeRequest):
    _check_length(req.text)
    try:
        syllables = [NormalizedSyllable(grapheme=g, jamo=normalize(g)) for g in graphemes(req.text)]
    except Exception:
        logger.exception("/normalize failed")
        raise HTTPException(status_code=500, detail="normalize failed")
    return NormalizeResponse(text=req.text, syllables=syllables)
