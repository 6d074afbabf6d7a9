"""
Verification - Metric Extraction.

============================================================
PURPOSE
============================================================
Pulls social metrics out of an attestation payload delivered
to the proof callback.

Payload shape (only the fields used here):

    {
        "identifier": "0x...",
        "claimData": {
            "context": "{\"extractedParameters\": {...}, ...}"
        }
    }

`claimData.context` may be a JSON string or an object.

============================================================
EXTRACTED PARAMETERS
============================================================
- followers_count     -> follower_count
- friends_count       -> following_count
- recent_tweets       -> engagement_rate (basis points)
- created_at          -> account_age_days
- name / screen_name  -> username

Missing engagement data scores as 0. Missing creation date
falls back to a configured default age.

============================================================
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Mapping, Optional

from reputation_scoring import SocialMetrics, coerce_non_negative_int

logger = logging.getLogger(__name__)

DEFAULT_ACCOUNT_AGE_DAYS = 365

TWITTER_DATE_FORMAT = "%a %b %d %H:%M:%S %z %Y"


@dataclass(frozen=True)
class ExtractedProfile:
    """Metrics and identity pulled from one attestation."""

    metrics: SocialMetrics
    username: str = "unknown"
    raw_parameters: Dict[str, Any] = field(default_factory=dict)


def parse_claim_context(proof: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Decode `claimData.context` from a proof.

    Raises:
        ValueError: If the context is missing or not a JSON object
    """
    claim_data = proof.get("claimData") or {}
    if not isinstance(claim_data, Mapping):
        raise ValueError("claimData is not an object")

    context = claim_data.get("context")
    if isinstance(context, str):
        context = json.loads(context)

    if not isinstance(context, Mapping):
        raise ValueError("claimData.context is not an object")

    return dict(context)


def calculate_engagement_rate(tweets: Optional[Iterable[Mapping[str, Any]]]) -> int:
    """
    Engagement rate over recent tweets, in basis points.

    rate = floor((likes + retweets + replies) / impressions * 10000)

    A tweet with a missing or zero impression count counts as
    1 impression.
    """
    if not tweets:
        return 0

    total_engagement = 0
    total_impressions = 0

    for tweet in tweets:
        if not isinstance(tweet, Mapping):
            continue
        likes = coerce_non_negative_int(tweet.get("likes", tweet.get("favorite_count")))
        retweets = coerce_non_negative_int(tweet.get("retweets", tweet.get("retweet_count")))
        replies = coerce_non_negative_int(tweet.get("replies", tweet.get("reply_count")))
        impressions = coerce_non_negative_int(
            tweet.get("impressions") or tweet.get("impression_count")
        ) or 1

        total_engagement += likes + retweets + replies
        total_impressions += impressions

    if total_impressions <= 0:
        return 0

    return (total_engagement * 10000) // total_impressions


def _parse_created_at(created_at: Any) -> Optional[datetime]:
    if isinstance(created_at, datetime):
        parsed = created_at
    elif isinstance(created_at, str) and created_at.strip():
        text = created_at.strip()
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            try:
                parsed = datetime.strptime(text, TWITTER_DATE_FORMAT)
            except ValueError:
                return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def calculate_account_age_days(created_at: Any, now: Optional[datetime] = None) -> int:
    """
    Whole days since account creation.

    Accepts datetimes, ISO-8601 strings and the Twitter
    "Wed Oct 10 20:19:24 +0000 2018" format. Missing, unparseable
    and future dates give 0.
    """
    created = _parse_created_at(created_at)
    if created is None:
        return 0

    now = now or datetime.now(timezone.utc)
    age_days = (now - created).days
    return age_days if age_days > 0 else 0


def extract_social_metrics(
    proof: Mapping[str, Any],
    default_account_age_days: int = DEFAULT_ACCOUNT_AGE_DAYS,
    now: Optional[datetime] = None,
) -> ExtractedProfile:
    """
    Extract scorer input from an attestation payload.

    Never raises: a payload whose context cannot be decoded yields
    zero metrics and an "unknown" username.

    Args:
        proof: Callback payload
        default_account_age_days: Age used when the payload carries no
            creation date
        now: Reference time for account age

    Returns:
        ExtractedProfile
    """
    try:
        context = parse_claim_context(proof)
    except (ValueError, TypeError) as e:
        logger.error(f"Could not decode claim context: {e}")
        return ExtractedProfile(metrics=SocialMetrics())

    params = context.get("extractedParameters") or {}
    if not isinstance(params, Mapping):
        logger.error("extractedParameters is not an object")
        return ExtractedProfile(metrics=SocialMetrics())

    tweets = params.get("recent_tweets", params.get("recentTweets"))
    if isinstance(tweets, str):
        try:
            tweets = json.loads(tweets)
        except ValueError:
            tweets = None
    engagement_rate = calculate_engagement_rate(tweets if isinstance(tweets, list) else None)

    created_at = params.get("created_at", params.get("createdAt"))
    if created_at:
        account_age_days = calculate_account_age_days(created_at, now)
    else:
        account_age_days = default_account_age_days

    metrics = SocialMetrics.from_raw(
        follower_count=params.get("followers_count"),
        following_count=params.get("friends_count"),
        engagement_rate=engagement_rate,
        account_age_days=account_age_days,
    )
    username = str(params.get("name") or params.get("screen_name") or "unknown")

    logger.info(
        f"Extracted metrics for @{username}: followers={metrics.follower_count} "
        f"following={metrics.following_count} engagement_bps={metrics.engagement_rate} "
        f"age_days={metrics.account_age_days}"
    )

    return ExtractedProfile(metrics=metrics, username=username, raw_parameters=dict(params))


def extract_user_address(proof: Mapping[str, Any]) -> Optional[str]:
    """
    Wallet address the proof was requested for.

    Looks at `context.userAddress` on the proof, then inside the
    claim context.
    """
    context = proof.get("context")
    if isinstance(context, str):
        try:
            context = json.loads(context)
        except ValueError:
            context = None
    if isinstance(context, Mapping):
        address = _bound_address(context.get("userAddress"))
        if address:
            return address

    try:
        claim_context = parse_claim_context(proof)
    except (ValueError, TypeError):
        return None

    return _bound_address(claim_context.get("userAddress")) or _bound_address(
        claim_context.get("contextAddress")
    )


def _bound_address(value: Any) -> Optional[str]:
    # "0x0" is the SDK placeholder when no address was bound
    if not value or str(value) == "0x0":
        return None
    return str(value)
