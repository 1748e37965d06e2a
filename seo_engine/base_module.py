# seo_engine/base_module.py
from abc import ABC, abstractmethod

from .document import DocumentQuery
from .models import AnalysisResult


class SEOModule(ABC):
    """
    Abstract base class for all SEO analyzers.

    An analyzer holds configuration only. Every call to `analyze` works on the
    document it is handed and keeps nothing between calls, so one instance can
    serve concurrent requests.
    """

    def __init__(self, config=None):
        self.module_name = self.__class__.__name__
        self.config = config if config else {}
        self.global_config = self.config.get("Global", {})

    @abstractmethod
    def analyze(self, document: DocumentQuery, url: str) -> AnalysisResult:
        """
        Analyzes a parsed page.

        Args:
            document (DocumentQuery): Read-only query facade over the page markup.
            url (str): Canonical URL of the page.

        Returns:
            AnalysisResult: Score, metrics, issues and recommendations. Never raises
            for malformed input; degraded input yields a degraded result.
        """

    def get_module_name(self) -> str:
        """Returns the name of the module."""
        return self.module_name
