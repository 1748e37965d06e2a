import math

import pytest

from seo_engine.content import ReadabilityAnalyzer
from seo_engine.content.readability import analyze_readability, classify_reading_ease, flesch_reading_ease
from seo_engine.content.text_utils import clean_text, count_paragraphs, count_syllables
from seo_engine.models import Priority


@pytest.mark.parametrize("text", ["", "   ", "\n\t \n"])
def test_empty_text_scores_zero_with_one_critical_issue(text):
    result = analyze_readability(text)
    assert result.score == 0
    assert result.details["grade"] == "No content"
    assert len(result.issues) == 1
    assert result.issues[0].priority is Priority.CRITICAL
    assert "300" in result.issues[0].recommendation
    assert result.metrics == {"wordCount": 0, "sentenceCount": 0, "syllableCount": 0}


def test_one_word_sentences_do_not_divide_by_zero():
    result = analyze_readability("word. word. word. word. word.")
    assert result.metrics["wordCount"] == 5
    assert result.metrics["sentenceCount"] == 5
    assert result.metrics["syllableCount"] == 5
    assert math.isfinite(result.score)
    # 206.835 - 1.015 - 84.6 is above 100 and gets clamped
    assert result.score == 100
    assert result.details["grade"] == "Very Easy"
    assert [(i.priority, i.category) for i in result.issues] == [
        (Priority.HIGH, "Content Length"),
        (Priority.LOW, "Content Quality"),
    ]


def test_punctuation_only_is_insufficient_content():
    result = analyze_readability("!!! ???")
    assert result.score == 0
    assert result.details["grade"] == "Insufficient content"
    assert result.issues == []
    assert result.metrics["sentenceCount"] == 0
    assert result.recommendations == ["Add more structured content with proper sentences"]


def test_dense_vocabulary_is_very_difficult():
    text = "Internationalization considerations necessitate comprehensive organizational transformation."
    result = analyze_readability(text)
    assert result.score == 0
    assert result.details["grade"] == "Very Difficult"
    assert result.details["readingLevel"] == "College graduate"
    assert result.details["seoImpact"] == "Very Poor"
    assert result.issues[0].priority is Priority.HIGH
    assert result.issues[0].category == "Content Quality"
    assert result.recommendations[:3] == [
        "Use shorter sentences (15-20 words average)",
        "Replace complex words with simpler alternatives",
        "Break long paragraphs into 2-3 sentences each",
    ]


def test_long_sentences_raise_medium_issue():
    text = " ".join(["cat"] * 30) + "."
    result = analyze_readability(text)
    assert result.metrics["avgWordsPerSentence"] == 30.0
    long_issues = [i for i in result.issues if i.category == "Readability"]
    assert len(long_issues) == 1
    assert long_issues[0].priority is Priority.MEDIUM
    assert "30.0 words" in long_issues[0].issue
    assert "Break long sentences into multiple shorter ones" in result.recommendations
    # 206.835 - 1.015 * 30 - 84.6 = 91.785
    assert result.score == 92


def test_mid_length_content_gets_low_expand_issue():
    text = " ".join(["The cat sat on the mat."] * 60)
    result = analyze_readability(text)
    assert result.metrics["wordCount"] == 360
    assert len(result.issues) == 1
    issue = result.issues[0]
    assert issue.priority is Priority.LOW
    assert issue.category == "Content Length"
    assert "360 words" in issue.issue
    assert result.recommendations == [
        "Expand content to 1000-2000 words for better SEO performance",
        "Use headings (H2, H3) to structure content every 200-300 words",
        "Add bullet points or numbered lists to improve scannability",
    ]


def test_structural_recommendations_are_always_last():
    result = analyze_readability(" ".join(["The garden grows well in spring weather."] * 200))
    assert result.recommendations[-2:] == [
        "Use headings (H2, H3) to structure content every 200-300 words",
        "Add bullet points or numbered lists to improve scannability",
    ]


@pytest.mark.parametrize("score,grade,level,impact,priority", [
    (95, "Very Easy", "5th grade", "Excellent", None),
    (85, "Easy", "6th grade", "Very Good", None),
    (75, "Fairly Easy", "7th grade", "Good", None),
    (65, "Standard", "8-9th grade", "Fair", None),
    (55, "Fairly Difficult", "10-12th grade", "Below Average", Priority.MEDIUM),
    (35, "Difficult", "College", "Poor", Priority.HIGH),
    (10, "Very Difficult", "College graduate", "Very Poor", Priority.HIGH),
    (0, "Very Difficult", "College graduate", "Very Poor", Priority.HIGH),
])
def test_reading_ease_bands(score, grade, level, impact, priority):
    got_grade, got_level, got_impact, issue = classify_reading_ease(score)
    assert (got_grade, got_level, got_impact) == (grade, level, impact)
    assert (issue.priority if issue else None) == priority


def test_flesch_is_clamped():
    assert flesch_reading_ease(1, 1, 1) == 100.0
    assert flesch_reading_ease(6, 1, 31) == 0.0


@pytest.mark.parametrize("word,expected", [
    ("cat", 1),
    ("the", 1),
    ("make", 1),
    ("cakes", 1),
    ("jumped", 1),
    ("rhythm", 1),
    ("beautiful", 3),
    ("queue", 1),
    ("garden", 2),
])
def test_count_syllables(word, expected):
    assert count_syllables(word) == expected


def test_clean_text_keeps_sentence_terminators():
    assert clean_text("Hello,   world!\nIt's  (really) fine?") == "Hello world! Its really fine?"


def test_paragraph_count_uses_blank_lines():
    assert count_paragraphs("First one. Short.\n\nSecond here.\n\n\nThird.") == 3
    assert analyze_readability("One line.\nSame paragraph.").metrics["paragraphCount"] == 1


def test_analyzer_reads_visible_body_text(good_document, page_url):
    result = ReadabilityAnalyzer().analyze(good_document, page_url)
    assert 0 <= result.score <= 100
    assert result.metrics["wordCount"] > 0
    assert result.details["grade"] not in ("No content", "Insufficient content")


def test_analyzer_thresholds_come_from_config(make_document):
    analyzer = ReadabilityAnalyzer(config={"min_words": 5, "target_words": 6})
    result = analyzer.analyze(make_document("<p>Six small words are in here.</p>"), "https://example.com")
    assert not [i for i in result.issues if i.category == "Content Length"]


def test_inline_markup_keeps_word_and_paragraph_counts(make_document):
    analyzer = ReadabilityAnalyzer()
    words = analyzer.analyze(make_document("<p>The <b>S</b>EO guide is un<em>believ</em>able.</p>"), "https://example.com")
    assert words.metrics["wordCount"] == 5
    paragraphs = analyzer.analyze(make_document("<p><b>Alpha</b>\n<i>beta</i> gamma.</p>"), "https://example.com")
    assert paragraphs.metrics["wordCount"] == 3
    assert paragraphs.metrics["paragraphCount"] == 1
