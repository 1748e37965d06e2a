import logging
from urllib.parse import urlparse

from ..base_module import SEOModule
from ..document import DocumentQuery
from ..models import AnalysisResult
from .images import ImageAttributes, analyze_images
from .links import LinkAttributes, analyze_internal_links
from .social import SOCIAL_META_KEYS, SocialTags, analyze_social_meta
from .title_meta import PageMeta, analyze_page_meta

logger = logging.getLogger(__name__)


def _present(value):
    return value is not None


class PageMetaAnalyzer(SEOModule):
    """Checks title, meta description, headings, HTTPS and the viewport tag."""

    def __init__(self, config=None):
        super().__init__(config=config)
        self.title_min_len = self.config.get("title_min_length", 10)
        self.title_max_len = self.config.get("title_max_length", 60)
        self.desc_min_len = self.config.get("desc_min_length", 50)
        self.desc_max_len = self.config.get("desc_max_length", 160)
        self.max_alt_penalty = self.config.get("max_alt_penalty", 10)

    def extract(self, document: DocumentQuery, url: str) -> PageMeta:
        titles = document.select("title")
        title = document.text(titles[0]).strip() if titles else None
        desc_tags = document.select_where("meta", "name", lambda v: v is not None and v.lower() == "description")
        description = document.attribute(desc_tags[0], "content") if desc_tags else None
        h1s = document.select("h1")
        try:
            scheme = urlparse(url).scheme.lower()
        except ValueError:
            scheme = ""
        return PageMeta(
            title=title or None,
            description=description.strip() if description else None,
            h1_text=" ".join(document.text(h).strip() for h in h1s).strip(),
            h1_count=len(h1s),
            h2_count=document.count("h2"),
            image_count=document.count("img"),
            images_missing_alt=document.count("img", "alt", lambda v: v is None),
            has_viewport=document.count("meta", "name", lambda v: v == "viewport") > 0,
            is_https=scheme == "https",
            word_count=len(document.text().split()),
        )

    def analyze(self, document: DocumentQuery, url: str) -> AnalysisResult:
        meta = self.extract(document, url)
        return analyze_page_meta(
            meta,
            title_min_len=self.title_min_len,
            title_max_len=self.title_max_len,
            desc_min_len=self.desc_min_len,
            desc_max_len=self.desc_max_len,
            max_alt_penalty=self.max_alt_penalty,
        )


class ImageAnalyzer(SEOModule):
    """Inspects every <img> for alt text, dimensions, lazy loading and format."""

    def analyze(self, document: DocumentQuery, url: str) -> AnalysisResult:
        images = [
            ImageAttributes(
                src=document.attribute(img, "src"),
                data_src=document.attribute(img, "data-src"),
                alt=document.attribute(img, "alt"),
                loading=document.attribute(img, "loading"),
                width=document.attribute(img, "width"),
                height=document.attribute(img, "height"),
            )
            for img in document.select("img")
        ]
        logger.debug("Found %d images on %s", len(images), url)
        return analyze_images(images, url)


class InternalLinkAnalyzer(SEOModule):
    """Classifies anchors as internal or external and grades anchor text."""

    def __init__(self, config=None):
        super().__init__(config=config)
        self.min_internal = self.config.get("min_internal_links", 3)
        self.max_internal = self.config.get("max_internal_links", 100)

    def analyze(self, document: DocumentQuery, url: str) -> AnalysisResult:
        links = [
            LinkAttributes(
                href=document.attribute(a, "href"),
                text=document.text(a),
                rel=document.attribute(a, "rel"),
            )
            for a in document.select_where("a", "href", _present)
        ]
        logger.debug("Found %d links on %s", len(links), url)
        return analyze_internal_links(links, url, min_internal=self.min_internal, max_internal=self.max_internal)


class SocialMetaAnalyzer(SEOModule):
    """Validates Open Graph and Twitter Card tags."""

    def extract(self, document: DocumentQuery) -> SocialTags:
        values = {
            field: document.first_attribute("meta", attr, key, "content")
            for field, (attr, key) in SOCIAL_META_KEYS.items()
        }
        return SocialTags.from_mapping(values)

    def analyze(self, document: DocumentQuery, url: str) -> AnalysisResult:
        return analyze_social_meta(self.extract(document))
