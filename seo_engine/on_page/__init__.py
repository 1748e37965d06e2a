"""On-Page analysis package.

Provides the page meta, image, internal link and social meta analyzers. Each
class in `analyzer.py` reads the page through the document facade and hands
plain values to the focused checks in sibling modules.
"""

from .analyzer import ImageAnalyzer, InternalLinkAnalyzer, PageMetaAnalyzer, SocialMetaAnalyzer
