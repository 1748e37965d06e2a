"""Content analysis package.

Provides `ReadabilityAnalyzer`, backed by the Flesch Reading Ease helpers in
sibling modules.
"""

from .analyzer import ReadabilityAnalyzer
