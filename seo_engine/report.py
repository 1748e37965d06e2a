from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import urlparse

from .base_module import SEOModule
from .content import ReadabilityAnalyzer
from .document import DocumentQuery, parse_document
from .models import AnalysisResult, Issue, Priority
from .on_page import ImageAnalyzer, InternalLinkAnalyzer, PageMetaAnalyzer, SocialMetaAnalyzer

logger = logging.getLogger(__name__)

ANALYZER_CLASSES = {
    cls.__name__: cls
    for cls in (PageMetaAnalyzer, ReadabilityAnalyzer, ImageAnalyzer, InternalLinkAnalyzer, SocialMetaAnalyzer)
}


class ReportAggregator:
    """
    Runs the selected analyzers against one document and collects their results.

    No blended page score is produced. Each analyzer scores on its own 0-100
    scale.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None, analyzers: Optional[Iterable[str]] = None):
        self.config = config or {}
        names = list(analyzers) if analyzers else list(ANALYZER_CLASSES)
        unknown = [n for n in names if n not in ANALYZER_CLASSES]
        if unknown:
            raise ValueError(f"Unknown analyzer(s): {', '.join(unknown)}. "
                             f"Available: {', '.join(ANALYZER_CLASSES)}")
        self.workers = int(self.config.get("ReportAggregator", {}).get("workers", len(names)) or 1)
        self.modules: List[SEOModule] = [self._build_module(n) for n in dict.fromkeys(names)]

    def _build_module(self, name: str) -> SEOModule:
        module_cfg = {"Global": self.config.get("Global", {}), **self.config.get(name, {})}
        return ANALYZER_CLASSES[name](config=module_cfg)

    def _run_one(self, module: SEOModule, document: DocumentQuery, url: str) -> AnalysisResult:
        logger.debug("Running %s for %s", module.module_name, url)
        try:
            return module.analyze(document, url)
        except Exception as e:
            logger.exception("Error running module %s for %s", module.module_name, url)
            return AnalysisResult(
                score=0,
                issues=[Issue(
                    Priority.MEDIUM, module.module_name,
                    f"Analysis failed: {e}",
                    "Check that the page markup can be parsed and retry")],
                details={"error": str(e)},
            )

    def run(self, document: DocumentQuery, url: str) -> Dict[str, AnalysisResult]:
        if len(self.modules) <= 1 or self.workers <= 1:
            return {m.module_name: self._run_one(m, document, url) for m in self.modules}
        with ThreadPoolExecutor(max_workers=min(self.workers, len(self.modules))) as ex:
            futures = [(m.module_name, ex.submit(self._run_one, m, document, url)) for m in self.modules]
            # registration order, not completion order
            return {name: fut.result() for name, fut in futures}

    def run_markup(self, markup: str | bytes, url: str) -> Dict[str, AnalysisResult]:
        return self.run(parse_document(markup), url)


def build_report(url: str, results: Dict[str, AnalysisResult]) -> Dict[str, Any]:
    try:
        domain = urlparse(url).netloc
    except ValueError:
        domain = ""
    return {
        "target_url": url,
        "domain": domain,
        "seo_attributes": {name: result.to_dict() for name, result in results.items()},
    }


def collect_issues(results: Dict[str, AnalysisResult]) -> List[Dict[str, Any]]:
    """Flattens every analyzer's issues into rows tagged with the analyzer name."""
    rows = []
    for name, result in results.items():
        for issue in result.issues:
            rows.append({"analyzer": name, **issue.to_dict()})
    return rows
