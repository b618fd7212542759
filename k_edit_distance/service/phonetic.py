# k_edit_distance/service/phonetic.py
# 자음 정규화 기반 음절 단위 편집 거리 (0.0 = 동일, 1.0 = 가장 다름)
# Kang Seung-Shik, "Word Similarity Calculation by Using the Edit Distance
# Metrics with Consonant Normalization"
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import numpy as np

from .jamo import graphemes, normalize
from .levenshtein import distance

logger = logging.getLogger(__name__)

# 한 음절의 최대 자모 수 (초성 + 중성 + 종성)
MAX_JAMO_PER_SYLLABLE = 3


def syllable_distances(s: str, t: str) -> List[Dict[str, Any]]:
    """
    음절 위치별 비교 결과.
    짧은 쪽의 빈 자리는 빈 음절("")로 보고 비교한다 (정렬은 하지 않음).
    """
    s_syllables = graphemes(s)
    t_syllables = graphemes(t)

    rows: List[Dict[str, Any]] = []
    for i in range(max(len(s_syllables), len(t_syllables))):
        s_part = s_syllables[i] if i < len(s_syllables) else ""
        t_part = t_syllables[i] if i < len(t_syllables) else ""
        s_norm = normalize(s_part)
        t_norm = normalize(t_part)
        rows.append({
            "position": i,
            "source": s_part,
            "target": t_part,
            "source_jamo": s_norm,
            "target_jamo": t_norm,
            "distance": distance(s_norm, t_norm),
        })
    return rows


def k_edit_distance(s: str, t: str, *, log: Optional[logging.Logger] = None) -> np.float32:
    """
    두 문자열의 정규화된 거리.
    - 음절별 자모 편집 거리의 합 / (3 * 긴 쪽 음절 수)
    - 비한글 입력이나 특이한 조합에서는 1.0을 살짝 넘을 수 있다
    """
    log = log or logger
    if not s and not t:
        return np.float32(0.0)
    log.debug("%s to %s", s, t)

    rows = syllable_distances(s, t)

    edit_distance = 0
    for row in rows:
        edit_distance += row["distance"]
        log.debug(
            "%d %d(%d) (%s(%s) %s(%s))",
            row["position"], edit_distance, row["distance"],
            row["source"], row["source_jamo"], row["target"], row["target_jamo"],
        )

    # 행 수 = 긴 쪽 음절 수
    denom = MAX_JAMO_PER_SYLLABLE * len(rows)
    score = np.float32(edit_distance) / np.float32(denom)
    log.debug("%d / %d = %s", edit_distance, denom, score)
    return score
