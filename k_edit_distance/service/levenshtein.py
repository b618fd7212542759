# k_edit_distance/service/levenshtein.py
# 편집 거리 (Wagner-Fischer, 삽입/삭제/치환 비용 1)
from typing import Sequence, TypeVar

T = TypeVar("T")


def distance(a: Sequence[T], b: Sequence[T]) -> int:
    """
    두 시퀀스 사이의 최소 편집 거리.
    원소는 == 비교만 되면 된다 (문자, 자모 리스트 등).
    """
    m, n = len(a), len(b)
    d = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        d[i][0] = i
    for j in range(1, n + 1):
        d[0][j] = j

    # 열 우선으로 채운다
    for j in range(1, n + 1):
        for i in range(1, m + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            d[i][j] = min(
                d[i - 1][j] + 1,
                d[i][j - 1] + 1,
                d[i - 1][j - 1] + cost,
            )

    return d[m][n]


def levenshtein_distance(s: str, t: str) -> int:
    """문자(코드 포인트) 단위 레벤슈타인 거리"""
    return distance(list(s), list(t))
