"""Insight generator tests: rule order, truncation, fallback, summary buckets."""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from app.constants import (
    STRENGTH_DEFINED_AUDIENCE,
    STRENGTH_DESCRIPTIVE_TITLE,
    STRENGTH_DETAILED_DESCRIPTION,
    STRENGTH_FALLBACK,
    TRACK_STRENGTHS,
    TRACK_WEAKNESSES,
    WEAKNESS_SHORT_DESCRIPTION,
    WEAKNESS_SHORT_TITLE,
    WEAKNESS_VAGUE_AUDIENCE,
)
from app.schemas.submission_schema import Submission
from app.services.insight_generator import (
    generate_recommendations,
    generate_strengths,
    generate_summary,
    generate_weaknesses,
)

TRACKS = ("startup", "project", "research", "hackathon")


def _submission(**overrides) -> Submission:
    data = {
        "title": "Idea",
        "description": "A short pitch.",
        "track": "startup",
    }
    data.update(overrides)
    return Submission(**data)


class TestStrengths:
    def test_all_rules_in_declaration_order(self):
        strengths = generate_strengths(
            _submission(
                title="Solar Kiosk Network",
                description="d" * 300,
                target_audience="a" * 60,
                budget="$25k seed",
            )
        )
        assert strengths == [
            STRENGTH_DETAILED_DESCRIPTION,
            STRENGTH_DEFINED_AUDIENCE,
            TRACK_STRENGTHS["startup"],
            STRENGTH_DESCRIPTIVE_TITLE,
        ]

    def test_fallback_when_nothing_fires(self):
        assert generate_strengths(_submission()) == [STRENGTH_FALLBACK]

    @pytest.mark.parametrize(
        "track,field",
        [("startup", "budget"), ("project", "timeline"), ("research", "keywords"), ("hackathon", "keywords")],
    )
    def test_track_specific_strength(self, track, field):
        strengths = generate_strengths(_submission(track=track, **{field: "given"}))
        assert strengths == [TRACK_STRENGTHS[track]]

    def test_audience_threshold_is_exclusive(self):
        assert STRENGTH_DEFINED_AUDIENCE not in generate_strengths(_submission(target_audience="a" * 50))
        assert STRENGTH_DEFINED_AUDIENCE in generate_strengths(_submission(target_audience="a" * 51))

    def test_audience_is_trimmed(self):
        padded = "  " + "a" * 50 + "  "
        assert STRENGTH_DEFINED_AUDIENCE not in generate_strengths(_submission(target_audience=padded))

    def test_never_more_than_four(self):
        for track in TRACKS:
            strengths = generate_strengths(
                _submission(
                    track=track,
                    title="A very descriptive title",
                    description="d" * 400,
                    target_audience="a" * 80,
                    budget="b",
                    timeline="t",
                    keywords="k",
                )
            )
            assert len(strengths) == 4


class TestWeaknesses:
    def test_truncated_to_first_three(self):
        weaknesses = generate_weaknesses(_submission(title="abc"))
        assert weaknesses == [
            WEAKNESS_SHORT_DESCRIPTION,
            WEAKNESS_VAGUE_AUDIENCE,
            TRACK_WEAKNESSES["startup"],
        ]
        assert WEAKNESS_SHORT_TITLE not in weaknesses

    def test_short_title_reported_when_room(self):
        weaknesses = generate_weaknesses(
            _submission(title="abc", description="d" * 220, target_audience="a" * 35, budget="$5k")
        )
        assert weaknesses == [WEAKNESS_SHORT_TITLE]

    def test_can_be_empty(self):
        weaknesses = generate_weaknesses(
            _submission(
                title="Medium title",
                description="d" * 220,
                target_audience="a" * 40,
                keywords="nlp",
                track="research",
            )
        )
        assert weaknesses == []

    def test_missing_audience_is_weakness(self):
        assert WEAKNESS_VAGUE_AUDIENCE in generate_weaknesses(_submission())
        assert WEAKNESS_VAGUE_AUDIENCE in generate_weaknesses(_submission(target_audience="a" * 29))
        assert WEAKNESS_VAGUE_AUDIENCE not in generate_weaknesses(_submission(target_audience="a" * 30))

    def test_audience_gap_triggers_neither_rule(self):
        submission = _submission(target_audience="a" * 40)
        assert WEAKNESS_VAGUE_AUDIENCE not in generate_weaknesses(submission)
        assert STRENGTH_DEFINED_AUDIENCE not in generate_strengths(submission)


class TestRecommendations:
    @pytest.mark.parametrize("track", TRACKS)
    def test_four_per_track(self, track):
        recommendations = generate_recommendations(track)
        assert len(recommendations) == 4
        assert len(set(recommendations)) == 4

    def test_unique_to_track(self):
        sets = [frozenset(generate_recommendations(track)) for track in TRACKS]
        assert len(set(sets)) == 4

    def test_idempotent_and_independent_copies(self):
        first = generate_recommendations("research")
        first.append("mutated")
        assert generate_recommendations("research") == first[:4]


class TestSummary:
    @pytest.mark.parametrize(
        "score,prefix",
        [
            (10.0, "Excellent"),
            (8.0, "Excellent"),
            (7.99, "Good"),
            (6.5, "Good"),
            (6.49, "Promising"),
            (5.0, "Promising"),
            (4.99, "Hackathon idea with potential"),
            (0.0, "Hackathon idea with potential"),
        ],
    )
    def test_bucket_boundaries(self, score, prefix):
        assert generate_summary("hackathon", score).startswith(prefix)

    def test_track_interpolated(self):
        assert "Good research idea" in generate_summary("research", 7.0)
        assert "Excellent startup idea" in generate_summary("startup", 9.1)

    def test_idempotent(self):
        assert generate_summary("project", 6.5) == generate_summary("project", 6.5)
