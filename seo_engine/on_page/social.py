from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, Optional
from urllib.parse import urlparse

from ..models import AnalysisResult, Issue, Priority

VALID_TWITTER_CARDS = frozenset(["summary", "summary_large_image", "app", "player"])

# field name -> (meta attribute, key); Open Graph and Facebook use "property", Twitter uses "name"
SOCIAL_META_KEYS = {
    "og_title": ("property", "og:title"),
    "og_description": ("property", "og:description"),
    "og_image": ("property", "og:image"),
    "og_image_width": ("property", "og:image:width"),
    "og_image_height": ("property", "og:image:height"),
    "og_url": ("property", "og:url"),
    "og_type": ("property", "og:type"),
    "og_site_name": ("property", "og:site_name"),
    "twitter_card": ("name", "twitter:card"),
    "twitter_title": ("name", "twitter:title"),
    "twitter_description": ("name", "twitter:description"),
    "twitter_image": ("name", "twitter:image"),
    "twitter_site": ("name", "twitter:site"),
    "twitter_creator": ("name", "twitter:creator"),
    "fb_app_id": ("property", "fb:app_id"),
}


@dataclass(frozen=True)
class SocialTags:
    """Social meta values; None means the tag is absent or has no content."""

    og_title: Optional[str] = None
    og_description: Optional[str] = None
    og_image: Optional[str] = None
    og_image_width: Optional[str] = None
    og_image_height: Optional[str] = None
    og_url: Optional[str] = None
    og_type: Optional[str] = None
    og_site_name: Optional[str] = None
    twitter_card: Optional[str] = None
    twitter_title: Optional[str] = None
    twitter_description: Optional[str] = None
    twitter_image: Optional[str] = None
    twitter_site: Optional[str] = None
    twitter_creator: Optional[str] = None
    fb_app_id: Optional[str] = None

    @classmethod
    def from_mapping(cls, values: Dict[str, Optional[str]]) -> "SocialTags":
        known = {f.name for f in fields(cls)}
        cleaned = {}
        for key, value in values.items():
            if key not in known:
                continue
            value = value.strip() if value else None
            cleaned[key] = value or None
        return cls(**cleaned)


def is_absolute_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def analyze_social_meta(tags: SocialTags) -> AnalysisResult:
    score = 100
    issues = []

    if not tags.og_title:
        score -= 10
        issues.append(Issue(
            Priority.HIGH, "Social Media",
            "Missing og:title - crucial for Facebook/LinkedIn shares",
            'Add <meta property="og:title" content="Your Page Title">'))

    if not tags.og_description:
        score -= 8
        issues.append(Issue(
            Priority.HIGH, "Social Media",
            "Missing og:description - affects social media CTR",
            'Add <meta property="og:description" content="Compelling description">'))

    if not tags.og_image:
        score -= 15
        issues.append(Issue(
            Priority.CRITICAL, "Social Media",
            "Missing og:image - shares will have no image preview",
            "Add high-quality image (1200x630px recommended) with og:image tag"))
    else:
        if not is_absolute_url(tags.og_image):
            score -= 5
            issues.append(Issue(
                Priority.MEDIUM, "Social Media",
                "og:image should be absolute URL, not relative",
                "Use full URL: https://yourdomain.com/image.jpg"))
        if not tags.og_image_width and not tags.og_image_height:
            score -= 3
            issues.append(Issue(
                Priority.LOW, "Social Media",
                "Missing og:image:width and og:image:height",
                "Specify image dimensions for better preview rendering"))

    if not tags.og_url:
        score -= 5
        issues.append(Issue(
            Priority.MEDIUM, "Social Media",
            "Missing og:url",
            "Add canonical URL with og:url for proper attribution"))

    if not tags.og_type:
        score -= 3
        issues.append(Issue(
            Priority.LOW, "Social Media",
            "Missing og:type",
            'Add og:type (usually "website" or "article")'))

    if not tags.twitter_card:
        score -= 10
        issues.append(Issue(
            Priority.HIGH, "Twitter",
            "Missing twitter:card - no Twitter card preview",
            'Add <meta name="twitter:card" content="summary_large_image">'))
    elif tags.twitter_card not in VALID_TWITTER_CARDS:
        score -= 3
        issues.append(Issue(
            Priority.MEDIUM, "Twitter",
            f"Invalid twitter:card type: {tags.twitter_card}",
            'Use "summary_large_image" for best visual impact'))

    if not tags.twitter_image and not tags.og_image:
        score -= 5
        issues.append(Issue(
            Priority.MEDIUM, "Twitter",
            "Missing twitter:image (and no og:image fallback)",
            "Add twitter:image or ensure og:image is present"))

    if not tags.twitter_site:
        score -= 3
        issues.append(Issue(
            Priority.LOW, "Twitter",
            "Missing twitter:site",
            'Add your Twitter handle: <meta name="twitter:site" content="@yourhandle">'))

    recommendations = []
    if not tags.og_image or not tags.twitter_image:
        recommendations.append("Create social media images (1200x630px for Facebook, 1200x600px for Twitter)")
    if any(i.priority in (Priority.HIGH, Priority.CRITICAL) for i in issues):
        recommendations.append("Fix critical social media tags to improve share appearance and CTR")
    if not tags.og_title or not tags.twitter_title:
        recommendations.append("Ensure social titles are compelling and different from page <title> if needed")
    if not tags.fb_app_id:
        recommendations.append("Consider adding fb:app_id for Facebook Insights tracking")
    recommendations.append("Test social previews with Facebook Sharing Debugger and Twitter Card Validator")
    recommendations.append("Use unique images for each page to improve social media engagement")

    og_complete = bool(tags.og_title and tags.og_description and tags.og_image and tags.og_url)
    twitter_image = tags.twitter_image or tags.og_image

    return AnalysisResult(
        score=max(0, score),
        metrics={
            "openGraphTagsFound": sum(1 for v in (tags.og_title, tags.og_description, tags.og_image,
                                                  tags.og_url, tags.og_type, tags.og_site_name) if v),
            "twitterTagsFound": sum(1 for v in (tags.twitter_card, tags.twitter_title, tags.twitter_description,
                                                tags.twitter_image, tags.twitter_site, tags.twitter_creator) if v),
        },
        issues=issues,
        recommendations=recommendations,
        details={
            "openGraph": {
                "title": tags.og_title,
                "description": tags.og_description,
                "image": tags.og_image,
                "url": tags.og_url,
                "type": tags.og_type,
                "siteName": tags.og_site_name,
                "complete": og_complete,
            },
            "twitter": {
                "card": tags.twitter_card,
                "title": tags.twitter_title or tags.og_title,
                "description": tags.twitter_description or tags.og_description,
                "image": twitter_image,
                "site": tags.twitter_site,
                "creator": tags.twitter_creator,
                "complete": bool(tags.twitter_card and twitter_image),
            },
            "facebook": {"appId": tags.fb_app_id},
            "hasBasicSetup": bool(tags.og_title and tags.og_image),
            "hasCompleteSetup": og_complete and bool(tags.twitter_card),
        },
    )
