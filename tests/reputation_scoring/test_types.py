"""
Tests for reputation scoring data contracts.
"""

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from reputation_scoring import (
    MAX_METRIC_VALUE,
    ReputationRecord,
    ReputationScore,
    SocialMetrics,
    clamp_score,
    coerce_non_negative_int,
    compute_score,
)


class TestCoerceNonNegativeInt:
    """Normalisation of untrusted metric values."""

    @pytest.mark.parametrize("value,expected", [
        (0, 0),
        (42, 42),
        (-1, 0),
        (3.99, 3),
        (-3.5, 0),
        (Decimal("12.7"), 12),
        (Decimal("-1"), 0),
        (Decimal("NaN"), 0),
        ("1500", 1500),
        (" 250.5 ", 250),
        ("-7", 0),
        ("1e3", 1000),
        ("twelve", 0),
        ("", 0),
        ("inf", 0),
        (None, 0),
        (True, 0),
        (False, 0),
        (float("nan"), 0),
        (float("inf"), 0),
        ([1, 2], 0),
        pytest.param(10 ** 5000, MAX_METRIC_VALUE, id="int-5001-digits"),
        (10 ** 15 + 1, MAX_METRIC_VALUE),
        (10 ** 15 - 1, 10 ** 15 - 1),
        (1e300, MAX_METRIC_VALUE),
        ("1e5000", MAX_METRIC_VALUE),
        ("1e999999999", MAX_METRIC_VALUE),
        (Decimal("999999999999999.9"), 999999999999999),
    ])
    def test_values(self, value, expected):
        assert coerce_non_negative_int(value) == expected

    def test_clamp_score(self):
        assert clamp_score(1001) == 1000
        assert clamp_score(-1) == 0
        assert clamp_score("640") == 640


class TestSocialMetrics:

    def test_constructor_normalises(self):
        metrics = SocialMetrics(follower_count=-10, following_count=5.9)

        assert metrics.follower_count == 0
        assert metrics.following_count == 5

    def test_immutable(self):
        metrics = SocialMetrics(follower_count=1)
        with pytest.raises(FrozenInstanceError):
            metrics.follower_count = 2

    def test_to_dict(self):
        assert SocialMetrics(1, 2, 3, 4).to_dict() == {
            "follower_count": 1,
            "following_count": 2,
            "engagement_rate": 3,
            "account_age_days": 4,
        }


class TestReputationScore:

    def test_value_is_clamped(self):
        assert ReputationScore(value=5000).value == 1000
        assert ReputationScore(value=-3).value == 0

    def test_missing_component_lookup(self):
        assert ReputationScore(value=10).get_component("followers") is None


class TestReputationRecord:

    @pytest.fixture
    def record(self):
        metrics = SocialMetrics(1500, 300, 250, 730)
        return ReputationRecord(
            identifier="proof-1",
            metrics=metrics,
            score=compute_score(metrics),
            user_address="0xAbC0000000000000000000000000000000000001",
            username="alice",
            verified_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )

    def test_not_expired_within_validity_period(self, record):
        now = record.verified_at + timedelta(days=30)
        assert record.is_expired(30, now=now) is False

    def test_expired_after_validity_period(self, record):
        now = record.verified_at + timedelta(days=30, seconds=1)
        assert record.is_expired(30, now=now) is True

    def test_to_dict(self, record):
        data = record.to_dict()

        assert data["identifier"] == "proof-1"
        assert data["username"] == "alice"
        assert data["verified_at"] == "2024-01-01T00:00:00+00:00"
        assert data["reputation"]["score"] == 730
