# k_edit_distance/service/jamo.py
# 음절(grapheme) 분리 + NFD 자모 분해 + 자음 정규화
import unicodedata
from types import MappingProxyType
from typing import List

import regex

# 초성 19개 (호환 자모 표기)
L_TABLE = list("ㄱㄲㄴㄷㄸㄹㅁㅂㅃㅅㅆㅇㅈㅉㅊㅋㅌㅍㅎ")
# 받침 27개 (호환 자모 표기)
T_TABLE = ["ㄱ", "ㄲ", "ㄳ", "ㄴ", "ㄵ", "ㄶ", "ㄷ", "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ",
           "ㅀ", "ㅁ", "ㅂ", "ㅄ", "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ"]

# NFD 결과로 나오는 조합형 자모
CHO = [chr(x) for x in range(0x1100, 0x1113)]
JONG = [chr(x) for x in range(0x11A8, 0x11C3)]

# 대표 자음 -> 같은 부류로 보는 자음들 (평음/경음/격음)
CONSONANT_CLASSES = MappingProxyType({
    "ㄱ": ("ㄱ", "ㅋ", "ㄲ"),
    "ㄷ": ("ㄷ", "ㄸ", "ㅌ"),
    "ㅂ": ("ㅂ", "ㅃ", "ㅍ"),
    "ㅅ": ("ㅅ", "ㅆ"),
    "ㅈ": ("ㅈ", "ㅉ", "ㅊ"),
})

_GRAPHEME = regex.compile(r"\X")


def _build_canonical() -> MappingProxyType:
    # 호환 자모, 초성, 종성 각각 자기 위치의 대표 자음으로 모은다
    positional = [
        {c: c for c in L_TABLE + T_TABLE},
        dict(zip(L_TABLE, CHO)),
        dict(zip(T_TABLE, JONG)),
    ]
    table = {}
    for forms in positional:
        for rep, members in CONSONANT_CLASSES.items():
            for member in members:
                # 종성에는 ㄸ/ㅃ/ㅉ 이 없다
                if member in forms:
                    table[forms[member]] = forms[rep]
    return MappingProxyType(table)


CANONICAL = _build_canonical()


def graphemes(text: str) -> List[str]:
    """확장 grapheme cluster 단위로 분리 (한글 음절 + 결합 문자는 한 덩어리)"""
    return _GRAPHEME.findall(text)


def normalize(grapheme: str) -> List[str]:
    """
    한 음절을 NFD로 분해하고 공백을 버린 뒤 자음 부류를 대표 자음으로 바꾼다.
    한글이 아닌 문자는 분해 결과 그대로 통과.
    """
    return [
        CANONICAL.get(ch, ch)
        for ch in unicodedata.normalize("NFD", grapheme)
        if ch != " "
    ]
