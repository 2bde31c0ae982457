"""Unit tests for confidence and hot scoring."""

from datetime import datetime, timedelta, timezone

import pytest

from topfive.config import RankingSettings
from topfive.domain.service import ScoreEngine, confidence_score, hot_score

Z = 1.281551565545


class TestConfidenceScore:
    """Tests for the Wilson lower bound."""

    def test_no_votes_scores_zero(self):
        """0 up, 0 down gives 0."""
        assert confidence_score(0, 0, Z) == 0.0

    def test_seven_up_three_down(self):
        """Known value for 7/3 at 80% confidence."""
        assert confidence_score(7, 3, Z) == pytest.approx(0.4974, abs=1e-4)

    def test_only_downvotes_scores_zero(self):
        assert confidence_score(0, 25, Z) == 0.0

    def test_score_stays_below_observed_ratio(self):
        score = confidence_score(90, 10, Z)
        assert 0.0 < score < 0.9

    def test_larger_sample_beats_smaller_with_same_ratio(self):
        """70/30 is more trustworthy than 7/3."""
        assert confidence_score(70, 30, Z) > confidence_score(7, 3, Z)

    @pytest.mark.parametrize("up,down", [(1, 1), (5, 5), (10, 40), (50, 2)])
    def test_extra_upvote_never_lowers_score(self, up, down):
        assert confidence_score(up + 1, down, Z) >= confidence_score(up, down, Z)

    @pytest.mark.parametrize("up,down", [(1, 1), (5, 5), (10, 40), (50, 2)])
    def test_extra_downvote_never_raises_score(self, up, down):
        assert confidence_score(up, down + 1, Z) <= confidence_score(up, down, Z)

    @pytest.mark.parametrize("total", [10, 20, 57])
    def test_more_upvotes_at_fixed_total_never_lowers_score(self, total):
        scores = [confidence_score(up, total - up, Z, 10) for up in range(total + 1)]

        for previous, current in zip(scores, scores[1:]):
            assert current >= previous
        for up, score in enumerate(scores):
            assert score <= up / total

    @pytest.mark.parametrize("k", [5, 10, 50, 500])
    def test_even_split_scores_below_half(self, k):
        assert confidence_score(k, k, Z, 10) < 0.5

    def test_below_min_votes_scores_zero(self):
        assert confidence_score(9, 0, Z, min_votes=10) == 0.0

    def test_at_min_votes_is_scored(self):
        assert confidence_score(10, 0, Z, min_votes=10) > 0.0

    def test_negative_counts_rejected(self):
        with pytest.raises(ValueError):
            confidence_score(-1, 3, Z)


class TestHotScore:
    """Tests for the time-weighted score."""

    def test_newer_resource_with_same_votes_is_hotter(self):
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        older = hot_score(10, 2, created)
        newer = hot_score(10, 2, created + timedelta(hours=1))
        assert newer > older

    def test_tenfold_votes_worth_decay_period(self):
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        ten = hot_score(10, 0, created)
        hundred = hot_score(100, 0, created)
        assert hundred - ten == pytest.approx(1.0, abs=1e-6)

    def test_net_negative_is_penalised(self):
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert hot_score(0, 10, created) < hot_score(10, 0, created)

    def test_naive_datetime_treated_as_utc(self):
        naive = datetime(2024, 1, 1)
        aware = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert hot_score(3, 1, naive) == hot_score(3, 1, aware)


class TestScoreEngine:
    """Tests for the configured scoring policy."""

    def test_uses_configured_threshold(self):
        engine = ScoreEngine(RankingSettings(min_votes=20))

        assert engine.score(15, 0) == 0.0
        assert engine.score(20, 0) > 0.0

    def test_default_threshold_is_ten(self):
        engine = ScoreEngine(RankingSettings())

        assert engine.score(7, 2) == 0.0
        assert engine.score(7, 3) == pytest.approx(0.4974, abs=1e-4)
