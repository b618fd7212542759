"""
tests/test_phonetic.py - 자음 정규화 음절 거리
"""
import logging
from unittest.mock import Mock

import numpy as np
import pytest

from k_edit_distance.service.phonetic import k_edit_distance, syllable_distances


@pytest.mark.parametrize("s, t, expected", [
    # 논문 예시
    ("국어", "숙어", 0.16666667),
    ("나무가지", "나뭇가지", 0.083333336),
    ("신문", "식물", 0.33333334),
    # 많이 다른 경우
    ("검은색", "분홍색", 0.6666667),
    ("신호등", "택시", 0.8888889),
    ("진공청소기", "솥", 0.8666667),
    ("하늘", "택시", 1.0),
])
def test_reference_scores(s, t, expected):
    assert k_edit_distance(s, t) == np.float32(expected)


def test_empty_pair_short_circuits():
    score = k_edit_distance("", "")
    assert score == 0.0
    assert isinstance(score, np.float32)


def test_returns_float32():
    assert isinstance(k_edit_distance("국어", "숙어"), np.float32)


def test_one_side_empty():
    # 국(3) + 어(2) / (3 * 2)
    assert k_edit_distance("국어", "") == np.float32(5) / np.float32(6)
    assert k_edit_distance("", "국어") == np.float32(5) / np.float32(6)


@pytest.mark.parametrize("s, t", [
    ("국어", "쿡어"),
    ("딸기", "탈기"),
    ("빵", "팡"),
    ("밖", "박"),
    ("짜다", "차다"),
    ("씨앗", "시앗"),
])
def test_confusable_consonants_score_zero(s, t):
    assert k_edit_distance(s, t) == 0.0


def test_spaces_inside_text_are_ignored_per_position():
    # 공백 음절은 빈 자모열이 된다
    assert k_edit_distance("가 나", "가나") == np.float32(2 + 2) / np.float32(9)


def test_latin_text_uses_same_denominator():
    assert k_edit_distance("abc", "abd") == np.float32(1) / np.float32(9)


def test_long_decomposition_can_exceed_one():
    # 결합 문자가 셋 붙은 한 글자 (4 코드 포인트) vs 한 글자
    score = k_edit_distance("a\u0301\u0302\u0303", "b")
    assert score == np.float32(4) / np.float32(3)
    assert score > 1.0


class TestWordList:

    def test_identity(self, words):
        for w in words:
            assert k_edit_distance(w, w) == 0.0

    def test_symmetry(self, words):
        for s in words:
            for t in words:
                assert k_edit_distance(s, t) == k_edit_distance(t, s)

    def test_bounds(self, words):
        for s in words:
            for t in words:
                assert 0.0 <= k_edit_distance(s, t) <= 1.0


class TestSyllableDistances:

    def test_rows_per_position(self):
        rows = syllable_distances("나무가지", "나뭇가지")
        assert [r["distance"] for r in rows] == [0, 1, 0, 0]
        assert rows[1]["source"] == "무"
        assert rows[1]["target"] == "뭇"
        assert rows[1]["source_jamo"] == ["ᄆ", "ᅮ"]
        assert rows[1]["target_jamo"] == ["ᄆ", "ᅮ", "ᆺ"]

    def test_missing_syllable_is_empty(self):
        rows = syllable_distances("신호등", "택시")
        assert len(rows) == 3
        assert rows[2]["target"] == ""
        assert rows[2]["target_jamo"] == []
        assert rows[2]["distance"] == 3

    def test_empty_pair(self):
        assert syllable_distances("", "") == []


class TestLogging:

    def test_debug_trace(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="k_edit_distance.service.phonetic"):
            k_edit_distance("국어", "숙어")
        messages = [r.getMessage() for r in caplog.records]
        assert messages[0] == "국어 to 숙어"
        assert len(messages) == 4
        assert messages[-1].startswith("1 / 6 = ")

    def test_injected_logger(self):
        log = Mock()
        k_edit_distance("신문", "식물", log=log)
        # 입력 1줄 + 음절 2줄 + 결과 1줄
        assert log.debug.call_count == 4

    def test_empty_pair_logs_nothing(self):
        log = Mock()
        k_edit_distance("", "", log=log)
        log.debug.assert_not_called()
