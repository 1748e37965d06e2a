from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import urlparse

from ..models import AnalysisResult, Issue, Priority

GENERIC_ANCHORS = frozenset(["click here", "read more", "learn more", "here", "this", "link"])

# Reported instead of a ratio when the page has no external links.
NO_EXTERNAL_LINKS = "N/A"

ANCHOR_TEXT_MAX_LENGTH = 100
TOP_ANCHORS_COUNT = 5


@dataclass(frozen=True)
class LinkAttributes:
    href: Optional[str]
    text: str = ""
    rel: Optional[str] = None


def page_host(url: str) -> str:
    """Host of the page URL; raises ValueError when the URL is not absolute."""
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.hostname:
        raise ValueError(f"Invalid URL: {url!r}")
    return parsed.hostname


def is_internal_href(href: str, host: str) -> bool:
    # Protocol-relative hrefs start with "/" and land here too.
    return (
        href.startswith("/")
        or href.startswith("#")
        or host in href
        or (not href.startswith("http") and not href.startswith("//"))
    )


def is_external_href(href: str) -> bool:
    return href.startswith("http") or href.startswith("//")


def top_anchors(anchor_texts: List[str], limit: int = TOP_ANCHORS_COUNT) -> List[dict]:
    # most_common keeps first-seen order among equal counts
    return [{"text": text, "count": count} for text, count in Counter(anchor_texts).most_common(limit)]


def _failed(message: str) -> AnalysisResult:
    return AnalysisResult(
        score=0,
        issues=[Issue(
            Priority.MEDIUM, "Internal Linking",
            "Could not analyze internal links",
            "Ensure page has valid URLs and link structure")],
        recommendations=[],
        details={"error": message},
    )


def analyze_internal_links(links: List[LinkAttributes], url: str,
                           min_internal: int = 3, max_internal: int = 100) -> AnalysisResult:
    try:
        host = page_host(url)
    except ValueError as e:
        return _failed(str(e))

    internal = external = broken = nofollow = generic = empty = 0
    anchor_texts = []

    for link in links:
        href = link.href
        if not href:
            broken += 1
            continue

        anchor = link.text.strip()
        if is_internal_href(href, host) and not href.startswith("#"):
            internal += 1
            if not anchor:
                empty += 1
            elif len(anchor) < ANCHOR_TEXT_MAX_LENGTH:
                anchor_texts.append(anchor)
                if anchor.lower() in GENERIC_ANCHORS:
                    generic += 1
            if "nofollow" in (link.rel or ""):
                nofollow += 1
        elif is_external_href(href):
            external += 1

    score = 100
    issues = []

    if internal < min_internal:
        score -= 15
        issues.append(Issue(
            Priority.HIGH, "Internal Linking",
            f"Very few internal links ({internal})",
            "Add 3-5 relevant internal links to help users navigate and distribute link equity"))
    elif internal > max_internal:
        score -= 8
        issues.append(Issue(
            Priority.MEDIUM, "Internal Linking",
            f"Too many internal links ({internal})",
            "Reduce to 50-100 internal links per page for better user experience"))

    if generic:
        score -= min(10, generic * 2)
        issues.append(Issue(
            Priority.MEDIUM, "Anchor Text",
            f'{generic} links use generic anchor text ("click here", "read more")',
            "Use descriptive anchor text that indicates link destination"))

    if empty:
        score -= min(8, empty * 3)
        issues.append(Issue(
            Priority.HIGH, "Accessibility",
            f"{empty} links have no anchor text",
            "Add descriptive text to all links for accessibility and SEO"))

    if nofollow:
        score -= 5
        issues.append(Issue(
            Priority.LOW, "Internal Linking",
            f"{nofollow} internal links are marked nofollow",
            'Remove rel="nofollow" from internal links to pass link equity'))

    if internal < external * 0.3 and external > 5:
        score -= 10
        issues.append(Issue(
            Priority.MEDIUM, "Link Balance",
            "More external links than internal links",
            "Balance external links with more internal links to keep users on your site"))

    recommendations = []
    if internal < 5:
        recommendations.append("Add contextual internal links to related content")
        recommendations.append("Link to your most important pages from this page")
    if generic > 3:
        recommendations.append('Replace "click here" with descriptive anchor text like "SEO best practices guide"')
    if 20 < internal < 50:
        recommendations.append("Good internal linking structure - consider adding 2-3 more strategic links")
    recommendations.append("Link to pages that need ranking boost using keyword-rich anchor text")
    recommendations.append("Use a mix of exact-match and natural anchor text for internal links")

    ratio = round(internal / external, 2) if external else NO_EXTERNAL_LINKS
    avg_anchor = round(sum(len(t) for t in anchor_texts) / len(anchor_texts), 1) if anchor_texts else 0

    return AnalysisResult(
        score=max(0, score),
        metrics={
            "totalLinks": len(links),
            "internalLinks": internal,
            "externalLinks": external,
            "brokenLinks": broken,
            "internalToExternalRatio": ratio,
            "genericAnchors": generic,
            "emptyAnchors": empty,
            "noFollowLinks": nofollow,
            "averageAnchorLength": avg_anchor,
        },
        issues=issues,
        recommendations=recommendations,
        details={"topAnchors": top_anchors(anchor_texts)},
    )
