import logging

from ..base_module import SEOModule
from ..document import DocumentQuery
from ..models import AnalysisResult
from .readability import analyze_readability
from .text_utils import extract_visible_text

logger = logging.getLogger(__name__)


class ReadabilityAnalyzer(SEOModule):
    """Scores how easy the page's body text is to read."""

    def __init__(self, config=None):
        super().__init__(config=config)
        self.min_words = self.config.get("min_words", 300)
        self.target_words = self.config.get("target_words", 1000)
        self.long_sentence_words = self.config.get("long_sentence_words", 25)

    def analyze(self, document: DocumentQuery, url: str) -> AnalysisResult:
        text = extract_visible_text(document)
        logger.debug("Scoring readability of %d characters for %s", len(text), url)
        return analyze_readability(
            text,
            min_words=self.min_words,
            target_words=self.target_words,
            long_sentence_words=self.long_sentence_words,
        )
