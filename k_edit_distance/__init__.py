# k_edit_distance/__init__.py
# ------------------------------------------------------------
# 자음 정규화 기반 한국어 편집 거리
# ------------------------------------------------------------

"""
K-Edit-Distance

- levenshtein_distance: 문자 단위 편집 거리
- k_edit_distance: 자음 정규화 음절 단위 거리 (0.0 = 동일, 1.0 = 가장 다름)
"""

__version__ = "0.1.0"

from .service.jamo import CONSONANT_CLASSES, graphemes, normalize
from .service.levenshtein import distance, levenshtein_distance
from .service.phonetic import k_edit_distance, syllable_distances
from .utils.log import setup_logging

__all__ = [
    "CONSONANT_CLASSES",
    "graphemes",
    "normalize",
    "distance",
    "levenshtein_distance",
    "k_edit_distance",
    "syllable_distances",
    "setup_logging",
]
