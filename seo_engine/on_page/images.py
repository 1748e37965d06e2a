from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..models import AnalysisResult, Issue, Priority

LEGACY_EXTENSIONS = frozenset(["jpg", "jpeg", "png", "gif"])
GENERIC_FILENAME_STEMS = frozenset(["image", "img", "photo", "pic", "picture"])
GENERIC_FILENAME_EXTENSIONS = ("jpg", "png", "webp")

# Images at 0-based index <= this are treated as above the fold.
FOLD_INDEX = 2
MAX_IMAGE_DETAILS = 10


@dataclass(frozen=True)
class ImageAttributes:
    src: Optional[str] = None
    data_src: Optional[str] = None
    alt: Optional[str] = None
    loading: Optional[str] = None
    width: Optional[str] = None
    height: Optional[str] = None

    @property
    def source(self) -> str:
        return self.src or self.data_src or ""


def image_extension(src: str) -> str:
    return src.split("?")[0].rsplit(".", 1)[-1].lower()


def is_legacy_format(src: str) -> bool:
    return image_extension(src) in LEGACY_EXTENSIONS


def is_generic_filename(src: str) -> bool:
    filename = src.split("/")[-1].split("?")[0]
    base, dot, rest = filename.partition(".")
    if not dot:
        return False
    stem = base.rstrip("0123456789").lower()
    return stem in GENERIC_FILENAME_STEMS and rest.lower().startswith(GENERIC_FILENAME_EXTENSIONS)


def _percent(count: int, total: int) -> str:
    return f"{count / total * 100:.0f}"


def analyze_images(images: List[ImageAttributes], url: str | None = None) -> AnalysisResult:
    total = len(images)
    if total == 0:
        return AnalysisResult(
            score=100,
            metrics={"totalImages": 0},
            recommendations=["Consider adding images to improve user engagement and SEO"],
        )

    missing_alt = empty_alt = missing_dimensions = not_lazy = legacy = generic_names = 0
    image_details = []

    for index, img in enumerate(images):
        src = img.source
        problems = []

        if img.alt is None:
            missing_alt += 1
            problems.append("Missing alt attribute")
        elif not img.alt.strip():
            empty_alt += 1
            problems.append("Empty alt attribute")

        if not img.width or not img.height:
            missing_dimensions += 1
            problems.append("Missing width/height attributes (causes layout shift)")

        if not img.loading and index > FOLD_INDEX:
            not_lazy += 1
            problems.append('Not lazy loaded (loading="lazy")')

        if is_legacy_format(src):
            legacy += 1
            problems.append(f"Old format (.{image_extension(src)}) - consider WebP or AVIF")

        if is_generic_filename(src):
            generic_names += 1
            problems.append("Generic filename - use descriptive names")

        if problems:
            image_details.append({"index": index + 1, "src": src[:100], "issues": problems})

    score = 100
    issues = []

    if missing_alt:
        score -= min(15, missing_alt * 2)
        issues.append(Issue(
            Priority.HIGH, "Accessibility & SEO",
            f"{missing_alt} images ({_percent(missing_alt, total)}%) missing alt text",
            "Add descriptive alt text to all images for accessibility and SEO"))

    if empty_alt:
        score -= min(5, empty_alt)
        issues.append(Issue(
            Priority.MEDIUM, "SEO",
            f"{empty_alt} images have empty alt attributes",
            'Add descriptive alt text or use alt="" only for decorative images'))

    if missing_dimensions:
        score -= min(10, missing_dimensions // 2)
        issues.append(Issue(
            Priority.HIGH, "Core Web Vitals",
            f"{missing_dimensions} images ({_percent(missing_dimensions, total)}%) missing width/height attributes",
            "Add width and height attributes to prevent Cumulative Layout Shift (CLS)"))

    if not_lazy and total > 5:
        score -= min(8, not_lazy // 3)
        issues.append(Issue(
            Priority.MEDIUM, "Performance",
            f"{not_lazy} below-the-fold images not lazy loaded",
            'Add loading="lazy" to images below the fold to improve page speed'))

    if legacy:
        score -= min(10, legacy // 5)
        issues.append(Issue(
            Priority.MEDIUM, "Performance",
            f"{legacy} images ({_percent(legacy, total)}%) using old formats (JPG/PNG)",
            "Convert images to WebP or AVIF for 25-35% file size reduction"))

    recommendations = []
    if missing_alt or empty_alt:
        recommendations.append("Write unique, descriptive alt text for each image (not just keywords)")
    if missing_dimensions:
        recommendations.append("Always specify width and height to prevent layout shifts and improve CLS")
    if legacy > total * 0.5:
        recommendations.append("Serve images in WebP format with fallback to JPG for better compression")
    if not_lazy > 5:
        recommendations.append("Implement lazy loading for all images below the fold")
    if total > 20:
        recommendations.append("Consider using an image CDN for automatic optimization and resizing")

    optimization_rate = round((total - missing_alt - empty_alt - missing_dimensions) / total * 100, 1)

    return AnalysisResult(
        score=max(0, score),
        metrics={
            "totalImages": total,
            "missingAlt": missing_alt,
            "emptyAlt": empty_alt,
            "missingDimensions": missing_dimensions,
            "notLazyLoaded": not_lazy,
            "legacyFormats": legacy,
            "genericFilenames": generic_names,
            "withAlt": total - missing_alt,
            "withDimensions": total - missing_dimensions,
            "lazyLoaded": total - not_lazy,
            "modernFormats": total - legacy,
            "optimizationRate": optimization_rate,
        },
        issues=issues,
        recommendations=recommendations,
        details={"imageDetails": image_details[:MAX_IMAGE_DETAILS]},
    )
