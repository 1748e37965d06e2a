"""SEO scoring engine.

Independent analyzers that score a single parsed page on metadata, images,
internal links, readability and social tags.
"""

from .content import ReadabilityAnalyzer
from .document import DocumentQuery, SoupDocument, parse_document
from .models import AnalysisResult, Issue, Priority, categorize_issues, sort_issues
from .on_page import ImageAnalyzer, InternalLinkAnalyzer, PageMetaAnalyzer, SocialMetaAnalyzer
from .report import ANALYZER_CLASSES, ReportAggregator, build_report
