from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..models import AnalysisResult, Issue, Priority, clamp_score


@dataclass(frozen=True)
class PageMeta:
    title: Optional[str] = None
    description: Optional[str] = None
    h1_text: str = ""
    h1_count: int = 0
    h2_count: int = 0
    image_count: int = 0
    images_missing_alt: int = 0
    has_viewport: bool = False
    is_https: bool = False
    word_count: int = 0


def analyze_page_meta(meta: PageMeta, title_min_len: int = 10, title_max_len: int = 60,
                      desc_min_len: int = 50, desc_max_len: int = 160,
                      max_alt_penalty: int = 10) -> AnalysisResult:
    score = 100
    issues = []
    title = meta.title or ""
    description = meta.description or ""

    if not title:
        score -= 10
        issues.append(Issue(Priority.HIGH, "Title", "Missing title tag",
                            "Add a unique, descriptive <title> to the page"))
    elif len(title) < title_min_len:
        score -= 5
        issues.append(Issue(Priority.MEDIUM, "Title", "Title is too short",
                            f"Expand the title to at least {title_min_len} characters"))
    elif len(title) > title_max_len:
        score -= 2
        issues.append(Issue(Priority.LOW, "Title", "Title is too long",
                            f"Keep the title under {title_max_len} characters so it is not truncated"))

    if not description:
        score -= 5
        issues.append(Issue(Priority.MEDIUM, "Meta Description", "Missing meta description",
                            'Add <meta name="description"> summarizing the page'))
    elif len(description) < desc_min_len:
        score -= 2
        issues.append(Issue(Priority.LOW, "Meta Description", "Meta description is too short",
                            f"Write at least {desc_min_len} characters of description"))
    elif len(description) > desc_max_len:
        score -= 1
        issues.append(Issue(Priority.LOW, "Meta Description", "Meta description is too long",
                            f"Trim the description to {desc_max_len} characters"))

    if meta.h1_count == 0:
        score -= 10
        issues.append(Issue(Priority.HIGH, "Headings", "Missing H1 heading",
                            "Add a single H1 describing the page topic"))
    elif meta.h1_count > 1:
        score -= 5
        issues.append(Issue(Priority.MEDIUM, "Headings", "Multiple H1 headings found",
                            "Use only one H1 per page and demote the others to H2"))

    if meta.images_missing_alt > 0:
        score -= min(max_alt_penalty, meta.images_missing_alt)
        issues.append(Issue(Priority.MEDIUM, "Images",
                            f"{meta.images_missing_alt} images missing alt attributes",
                            "Add alt attributes to every image"))

    if not meta.is_https:
        score -= 10
        issues.append(Issue(Priority.HIGH, "Security", "Site is not using HTTPS",
                            "Serve the page over HTTPS"))

    if not meta.has_viewport:
        score -= 10
        issues.append(Issue(Priority.HIGH, "Mobile", "Missing viewport meta tag",
                            'Add <meta name="viewport" content="width=device-width, initial-scale=1">'))

    return AnalysisResult(
        score=clamp_score(score),
        metrics={
            "h1Count": meta.h1_count,
            "h2Count": meta.h2_count,
            "imgCount": meta.image_count,
            "imgWithoutAlt": meta.images_missing_alt,
            "wordCount": meta.word_count,
            "titleLength": len(title),
            "descriptionLength": len(description),
        },
        issues=issues,
        recommendations=[i.recommendation for i in issues],
        details={"title": title, "metaDescription": description, "h1": meta.h1_text},
    )
