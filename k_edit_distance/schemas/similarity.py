# 데이터 스키마 정의 (Pydantic v2)
# - 입력: 비교할 두 문자열 / 정규화할 문자열
# - 출력: 거리, 점수, 음절별 자모 분해 결과

from typing import List, Optional
from pydantic import BaseModel, Field


class PairRequest(BaseModel):
    source: str = Field(..., description="비교 기준 문자열")
    target: str = Field(..., description="비교 대상 문자열")


class KEditRequest(PairRequest):
    # true면 음절 위치별 계산 내역도 돌려준다
    details: bool = Field(default=False, description="음절별 계산 내역 포함 여부")


class NormalizeRequest(BaseModel):
    text: str = Field(..., description="정규화할 문자열")


class LevenshteinResponse(BaseModel):
    source: str
    target: str
    distance: int


class SyllableDistance(BaseModel):
    position: int
    source: str
    target: str
    source_jamo: List[str]
    target_jamo: List[str]
    distance: int


class KEditResponse(BaseModel):
    source: str
    target: str
    score: float            # 0.0 = 동일, 1.0 = 가장 다름
    syllables: Optional[List[SyllableDistance]] = None


class NormalizedSyllable(BaseModel):
    grapheme: str
    jamo: List[str]


class NormalizeResponse(BaseModel):
    text: str
    syllables: List[NormalizedSyllable]
