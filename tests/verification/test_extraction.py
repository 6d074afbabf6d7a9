"""
Tests for metric extraction from attestation payloads.
"""

from datetime import datetime, timezone

import pytest

from verification import (
    calculate_account_age_days,
    calculate_engagement_rate,
    extract_social_metrics,
    extract_user_address,
    parse_claim_context,
)


NOW = datetime(2023, 1, 1, tzinfo=timezone.utc)


# =============================================================
# TEST: Engagement Rate
# =============================================================

class TestEngagementRate:

    def test_basis_points(self):
        tweets = [{"likes": 30, "retweets": 10, "replies": 10, "impressions": 1000}]
        assert calculate_engagement_rate(tweets) == 500

    def test_twitter_field_names(self):
        tweets = [
            {"favorite_count": 20, "retweet_count": 5, "reply_count": 5, "impression_count": 2000},
            {"favorite_count": 10, "retweet_count": 0, "reply_count": 0, "impression_count": 1000},
        ]
        # 40 engagements over 3000 impressions
        assert calculate_engagement_rate(tweets) == 133

    def test_missing_impressions_count_as_one(self):
        assert calculate_engagement_rate([{"likes": 1}]) == 10000

    def test_zero_impressions_count_as_one(self):
        assert calculate_engagement_rate([{"likes": 5, "impressions": 0}]) == 50000

    def test_zero_impressions_fall_back_to_impression_count(self):
        tweets = [{"likes": 5, "impressions": 0, "impression_count": 100}]
        assert calculate_engagement_rate(tweets) == 500

    def test_huge_counts_saturate(self):
        tweets = [{"likes": "1e999999999", "impressions": 10 ** 5000}]
        assert calculate_engagement_rate(tweets) == 10000

    @pytest.mark.parametrize("tweets", [None, [], ["not a tweet"]])
    def test_no_usable_tweets(self, tweets):
        assert calculate_engagement_rate(tweets) == 0


# =============================================================
# TEST: Account Age
# =============================================================

class TestAccountAge:

    def test_iso_date(self):
        # 2020 is a leap year
        assert calculate_account_age_days("2020-01-01T00:00:00Z", now=NOW) == 1096

    def test_twitter_date_format(self):
        assert calculate_account_age_days("Thu Dec 22 00:00:00 +0000 2022", now=NOW) == 10

    def test_naive_datetime_is_utc(self):
        assert calculate_account_age_days(datetime(2022, 12, 1), now=NOW) == 31

    @pytest.mark.parametrize("created_at", [None, "", "yesterday", 12345, "2030-01-01T00:00:00Z"])
    def test_unusable_dates(self, created_at):
        assert calculate_account_age_days(created_at, now=NOW) == 0


# =============================================================
# TEST: Claim Context
# =============================================================

class TestParseClaimContext:

    def test_string_context(self, sample_proof):
        context = parse_claim_context(sample_proof)
        assert context["extractedParameters"]["name"] == "alice"

    def test_object_context(self, proof_factory):
        context = parse_claim_context(proof_factory(context_as_string=False))
        assert context["extractedParameters"]["followers_count"] == "1500"

    @pytest.mark.parametrize("proof", [
        {},
        {"claimData": None},
        {"claimData": "oops"},
        {"claimData": {"context": "[1, 2]"}},
    ])
    def test_invalid_context(self, proof):
        with pytest.raises(ValueError):
            parse_claim_context(proof)


# =============================================================
# TEST: Metric Extraction
# =============================================================

class TestExtractSocialMetrics:

    def test_follow_counts_with_default_age(self, sample_proof):
        profile = extract_social_metrics(sample_proof, now=NOW)

        assert profile.username == "alice"
        assert profile.metrics.follower_count == 1500
        assert profile.metrics.following_count == 300
        assert profile.metrics.engagement_rate == 0
        assert profile.metrics.account_age_days == 365
        assert profile.raw_parameters["friends_count"] == "300"

    def test_custom_default_age(self, sample_proof):
        profile = extract_social_metrics(sample_proof, default_account_age_days=0, now=NOW)
        assert profile.metrics.account_age_days == 0

    def test_engagement_and_age_when_present(self, proof_factory):
        proof = proof_factory(params={
            "followers_count": 12000,
            "friends_count": 100,
            "screen_name": "bob",
            "created_at": "2020-01-01T00:00:00Z",
            "recent_tweets": [{"likes": 40, "retweets": 5, "replies": 5, "impressions": 1000}],
        })
        profile = extract_social_metrics(proof, now=NOW)

        assert profile.username == "bob"
        assert profile.metrics.engagement_rate == 500
        assert profile.metrics.account_age_days == 1096

    def test_recent_tweets_as_json_string(self, proof_factory):
        proof = proof_factory(params={
            "followers_count": "10",
            "recent_tweets": '[{"likes": 1, "impressions": 100}]',
        })
        assert extract_social_metrics(proof, now=NOW).metrics.engagement_rate == 100

    def test_garbage_counts(self, proof_factory):
        proof = proof_factory(params={"followers_count": "-40", "friends_count": "lots"})
        metrics = extract_social_metrics(proof, now=NOW).metrics

        assert metrics.follower_count == 0
        assert metrics.following_count == 0

    def test_malformed_context_yields_empty_profile(self):
        profile = extract_social_metrics({"identifier": "x", "claimData": {"context": "{not json"}})

        assert profile.username == "unknown"
        assert profile.metrics.to_dict() == {
            "follower_count": 0,
            "following_count": 0,
            "engagement_rate": 0,
            "account_age_days": 0,
        }

    def test_non_object_parameters(self, proof_factory):
        profile = extract_social_metrics(proof_factory(params=["nope"]))
        assert profile.metrics.follower_count == 0


# =============================================================
# TEST: Wallet Address
# =============================================================

class TestExtractUserAddress:

    def test_from_proof_context(self, sample_proof):
        assert extract_user_address(sample_proof) == "0xAbCdEf0123456789aBCdEF0123456789AbCdEf01"

    def test_from_json_string_context(self, proof_factory):
        proof = proof_factory(user_address=None)
        proof["context"] = '{"userAddress": "0x1111111111111111111111111111111111111111"}'
        assert extract_user_address(proof) == "0x1111111111111111111111111111111111111111"

    def test_placeholder_context_address_is_ignored(self, proof_factory):
        assert extract_user_address(proof_factory(user_address=None)) is None

    def test_placeholder_user_address_is_ignored(self, proof_factory):
        assert extract_user_address(proof_factory(user_address="0x0")) is None
        assert extract_user_address({"context": {"userAddress": "0x0"}}) is None

    def test_placeholder_user_address_falls_back_to_claim(self, proof_factory):
        proof = proof_factory(user_address="0x0", context_as_string=False)
        proof["claimData"]["context"]["contextAddress"] = "0x2222222222222222222222222222222222222222"
        assert extract_user_address(proof) == "0x2222222222222222222222222222222222222222"

    def test_bound_context_address(self, proof_factory):
        proof = proof_factory(user_address=None, context_as_string=False)
        proof["claimData"]["context"]["contextAddress"] = "0x2222222222222222222222222222222222222222"
        assert extract_user_address(proof) == "0x2222222222222222222222222222222222222222"
