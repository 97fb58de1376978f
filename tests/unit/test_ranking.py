"""Vector math, hot score and feature overlap."""

import math
from datetime import datetime, timedelta, timezone

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from skillscope.modules.ranking import (
    age_in_days,
    average_vectors,
    cosine_similarity,
    hot_score,
    pair_key,
    shared_features,
    similarity_matrix,
    unique_features,
)

floats = st.floats(min_value=-1e3, max_value=1e3, allow_nan=False, allow_infinity=False).filter(
    lambda x: x == 0.0 or abs(x) > 1e-6
)


def vectors(size):
    return st.lists(floats, min_size=size, max_size=size)


class TestCosine:
    def test_orthogonal(self):
        assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == 0.0

    def test_parallel(self):
        assert cosine_similarity([1.0, 2.0], [2.0, 4.0]) == pytest.approx(1.0)

    def test_opposite(self):
        assert cosine_similarity([1.0, 0.0], [-3.0, 0.0]) == pytest.approx(-1.0)

    def test_zero_norm_is_nan(self):
        assert math.isnan(cosine_similarity([0.0, 0.0], [1.0, 0.0]))

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            cosine_similarity([1.0], [1.0, 2.0])

    @given(st.integers(min_value=1, max_value=8).flatmap(lambda n: st.tuples(vectors(n), vectors(n))))
    def test_symmetric_and_bounded(self, pair):
        a, b = pair
        score = cosine_similarity(a, b)
        assume(not math.isnan(score))
        assert score == pytest.approx(cosine_similarity(b, a))
        assert -1.0 - 1e-9 <= score <= 1.0 + 1e-9

    @given(st.integers(min_value=1, max_value=8).flatmap(vectors))
    def test_self_similarity(self, a):
        assume(any(abs(x) > 1e-3 for x in a))
        assert cosine_similarity(a, a) == pytest.approx(1.0)


class TestAverage:
    def test_mean(self):
        assert average_vectors([[1.0, 3.0], [3.0, 5.0]]) == [2.0, 4.0]

    def test_empty(self):
        with pytest.raises(ValueError):
            average_vectors([])

    def test_ragged(self):
        with pytest.raises(ValueError):
            average_vectors([[1.0], [1.0, 2.0]])


class TestSimilarityMatrix:
    def test_keys_follow_input_order(self):
        matrix = similarity_matrix([("a", [1.0, 0.0]), ("b", [0.0, 1.0]), ("c", [1.0, 1.0])])
        assert list(matrix) == [pair_key("a", "b"), pair_key("a", "c"), pair_key("b", "c")]
        assert matrix["a:b"] == 0.0
        assert matrix["a:c"] == 0.707

    def test_missing_vectors_are_skipped(self):
        matrix = similarity_matrix([("a", [1.0, 0.0]), ("b", None), ("c", [1.0, 0.0])])
        assert matrix == {"a:c": 1.0}

    def test_zero_vectors_are_skipped(self):
        assert similarity_matrix([("a", [0.0, 0.0]), ("b", [1.0, 0.0])]) == {}


class TestHotScore:
    def test_age_floored_at_one_day(self):
        assert hot_score(10, 0.25) == 10.0

    def test_mentions_per_day(self):
        assert hot_score(10, 4.0) == 2.5

    def test_rounded(self):
        assert hot_score(10, 3.0) == 3.33

    def test_age_in_days(self):
        now = datetime(2026, 3, 1, tzinfo=timezone.utc)
        assert age_in_days(now - timedelta(hours=36), now) == 1.5

    @given(st.integers(min_value=0, max_value=10_000), st.floats(min_value=0, max_value=365))
    def test_non_negative_and_bounded_by_mentions(self, mentions, age):
        score = hot_score(mentions, age)
        assert 0 <= score <= mentions


class TestFeatures:
    def test_shared_keeps_first_group_order(self):
        groups = [["git", "docker", "jq"], ["jq", "git"], ["git", "jq", "curl"]]
        assert shared_features(groups) == ["git", "jq"]

    def test_unique_excludes_every_other_group(self):
        groups = [["git", "docker"], ["git", "helm"], ["docker", "curl"]]
        assert unique_features(groups, 0) == []
        assert unique_features(groups, 1) == ["helm"]
        assert unique_features(groups, 2) == ["curl"]

    def test_empty(self):
        assert shared_features([]) == []
        assert shared_features([[], ["a"]]) == []
