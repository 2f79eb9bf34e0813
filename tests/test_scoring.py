"""Unit tests for keyword extraction and compatibility scoring."""

from datetime import timedelta

import pytest

from venue_feed.ranking.keywords import extract_keywords
from venue_feed.ranking.policy import (
    BIO_SIMILARITY_WEIGHT,
    FRESH_WINDOW,
    RECENCY_WEIGHT,
    STALE_AFTER,
    STOPWORDS,
)
from venue_feed.ranking.scoring import (
    bio_similarity,
    composite_score,
    recency_score,
    score_breakdown,
)
from tests.helpers import NOW, make_candidate, make_viewer, minutes_ago


class TestExtractKeywords:
    """Tests for extract_keywords."""

    @pytest.mark.parametrize("bio", [None, "", "   "])
    def test_missing_bio_yields_empty_set(self, bio):
        assert extract_keywords(bio) == set()

    def test_lowercases_and_strips_punctuation(self):
        assert extract_keywords("Musica, VIAGEM! fotografia...") == {
            "musica",
            "viagem",
            "fotografia",
        }

    def test_keeps_accented_letters(self):
        assert extract_keywords("Música e café") == {"música", "café"}

    def test_digits_split_tokens(self):
        assert extract_keywords("rock2024 jazz") == {"rock", "jazz"}

    def test_drops_short_tokens(self):
        assert extract_keywords("oi tv bar pub") == {"bar", "pub"}

    def test_drops_stopwords(self):
        assert extract_keywords("gosto de musica para ter uma vida") == {"musica", "vida"}

    def test_duplicates_collapse(self):
        assert extract_keywords("samba samba SAMBA") == {"samba"}

    def test_stopwords_are_lowercase(self):
        assert all(word == word.lower() for word in STOPWORDS)


class TestBioSimilarity:
    """Tests for bio_similarity."""

    def test_identical_bios_score_one(self):
        bio = "Gosto musica viagem fotografia"
        assert bio_similarity(bio, bio) == 1.0

    def test_disjoint_bios_score_zero(self):
        assert bio_similarity("Gosto culinaria", "Adoro programacao") == 0.0

    def test_both_missing_score_zero(self):
        assert bio_similarity(None, None) == 0.0
        assert bio_similarity("", "   ") == 0.0

    def test_one_missing_scores_zero(self):
        assert bio_similarity("musica viagem", None) == 0.0

    def test_only_stopwords_scores_zero(self):
        assert bio_similarity("gosto de", "curto a") == 0.0

    def test_partial_overlap_divides_by_larger_set(self):
        score = bio_similarity("musica viagem fotografia", "musica esportes livros cinema")
        assert score == pytest.approx(1 / 4)

    def test_smaller_bio_contained_in_larger(self):
        assert bio_similarity("musica viagem", "musica viagem cinema teatro") == pytest.approx(0.5)

    def test_symmetric(self):
        a = "musica viagem fotografia"
        b = "musica cinema"
        assert bio_similarity(a, b) == bio_similarity(b, a)

    def test_stopwords_do_not_affect_score(self):
        with_stopwords = bio_similarity("gosto de musica e viagem", "curto a musica com viagem")
        without_stopwords = bio_similarity("musica viagem", "musica viagem")
        assert with_stopwords == without_stopwords == 1.0

        assert bio_similarity("musica de viagem", "musica cinema") == bio_similarity(
            "musica viagem", "musica cinema"
        )


class TestRecencyScore:
    """Tests for recency_score."""

    def test_checked_in_now_scores_one(self):
        assert recency_score(NOW, NOW) == 1.0

    def test_end_of_fresh_window_scores_one(self):
        assert recency_score(NOW - FRESH_WINDOW, NOW) == 1.0

    def test_exactly_stale_scores_zero(self):
        assert recency_score(NOW - STALE_AFTER, NOW) == 0.0

    def test_past_stale_scores_zero(self):
        assert recency_score(NOW - timedelta(hours=5), NOW) == 0.0

    def test_midpoint_scores_half(self):
        midpoint = FRESH_WINDOW + (STALE_AFTER - FRESH_WINDOW) / 2
        assert recency_score(NOW - midpoint, NOW) == pytest.approx(0.5)

    def test_three_hours(self):
        expected = 1 - (180 - 15) / (240 - 15)
        assert recency_score(minutes_ago(180), NOW) == pytest.approx(expected)

    def test_future_check_in_counts_as_fresh(self):
        assert recency_score(NOW + timedelta(minutes=3), NOW) == 1.0

    def test_monotonically_non_increasing(self):
        scores = [recency_score(minutes_ago(m), NOW) for m in range(0, 301)]
        assert all(later <= earlier for earlier, later in zip(scores, scores[1:]))
        assert all(0.0 <= s <= 1.0 for s in scores)

    def test_naive_datetimes_treated_as_utc(self):
        naive_now = NOW.replace(tzinfo=None)
        naive_check_in = minutes_ago(60).replace(tzinfo=None)
        assert recency_score(naive_check_in, naive_now) == recency_score(minutes_ago(60), NOW)


class TestCompositeScore:
    """Tests for composite_score and score_breakdown."""

    def test_weights_sum_to_one(self):
        assert BIO_SIMILARITY_WEIGHT + RECENCY_WEIGHT == pytest.approx(1.0)

    def test_perfect_match_scores_one(self):
        bio = "musica viagem fotografia"
        viewer = make_viewer(bio=bio)
        candidate = make_candidate(bio=bio, checked_in_at=minutes_ago(1))
        assert composite_score(viewer, candidate, NOW) == pytest.approx(1.0)

    def test_no_signal_scores_zero(self):
        viewer = make_viewer(bio=None)
        candidate = make_candidate(bio=None, checked_in_at=minutes_ago(300))
        assert composite_score(viewer, candidate, NOW) == 0.0

    def test_weighted_sum(self):
        viewer = make_viewer(bio="musica viagem")
        candidate = make_candidate(bio="musica cinema", checked_in_at=minutes_ago(180))

        breakdown = score_breakdown(viewer, candidate, NOW)

        assert breakdown.similarity == pytest.approx(0.5)
        assert breakdown.recency == pytest.approx(1 - 165 / 225)
        assert breakdown.composite == pytest.approx(
            0.6 * breakdown.similarity + 0.4 * breakdown.recency
        )
        assert breakdown.shared_keywords == frozenset({"musica"})

    def test_breakdown_as_dict(self):
        viewer = make_viewer(bio="musica viagem")
        candidate = make_candidate(bio="viagem musica", checked_in_at=minutes_ago(2))

        data = score_breakdown(viewer, candidate, NOW).as_dict()

        assert data == {
            "similarity": 1.0,
            "recency": 1.0,
            "composite": 1.0,
            "shared_keywords": ["musica", "viagem"],
        }
