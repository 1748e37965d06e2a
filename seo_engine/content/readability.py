import math

from ..models import AnalysisResult, Issue, Priority
from .text_utils import clean_text, count_paragraphs, count_syllables, split_sentences, split_words

# (minimum score, grade, reading level, SEO impact, issue raised for the band)
READING_EASE_BANDS = (
    (90, "Very Easy", "5th grade", "Excellent", None),
    (80, "Easy", "6th grade", "Very Good", None),
    (70, "Fairly Easy", "7th grade", "Good", None),
    (60, "Standard", "8-9th grade", "Fair", None),
    (50, "Fairly Difficult", "10-12th grade", "Below Average", Issue(
        Priority.MEDIUM, "Content Quality",
        "Content may be too complex for average readers",
        "Simplify sentences and use shorter words to improve readability")),
    (30, "Difficult", "College", "Poor", Issue(
        Priority.HIGH, "Content Quality",
        "Content is difficult to read (college level)",
        "Break down complex sentences and use simpler vocabulary")),
    (0, "Very Difficult", "College graduate", "Very Poor", Issue(
        Priority.HIGH, "Content Quality",
        "Content is very difficult to read",
        "Significantly simplify content for broader audience reach")),
)

STRUCTURE_RECOMMENDATIONS = (
    "Use headings (H2, H3) to structure content every 200-300 words",
    "Add bullet points or numbered lists to improve scannability",
)


def flesch_reading_ease(word_count: int, sentence_count: int, syllable_count: int) -> float:
    """Flesch Reading Ease clamped to [0, 100]. Counts must be positive."""
    asl = word_count / sentence_count
    asw = syllable_count / word_count
    score = 206.835 - 1.015 * asl - 84.6 * asw
    return max(0.0, min(100.0, score))


def classify_reading_ease(score: float) -> tuple:
    for minimum, grade, level, impact, issue in READING_EASE_BANDS:
        if score >= minimum:
            return grade, level, impact, issue
    # unreachable for clamped scores
    _, grade, level, impact, issue = READING_EASE_BANDS[-1]
    return grade, level, impact, issue


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def analyze_readability(text: str, min_words: int = 300, target_words: int = 1000,
                        long_sentence_words: float = 25) -> AnalysisResult:
    if not text or not text.strip():
        return AnalysisResult(
            score=0,
            details={"grade": "No content", "readingLevel": None, "seoImpact": None},
            metrics={"wordCount": 0, "sentenceCount": 0, "syllableCount": 0},
            issues=[Issue(
                Priority.CRITICAL, "Content",
                "No readable content found on page",
                f"Add substantive content (minimum {min_words} words) to improve SEO")],
            recommendations=[f"Add at least {min_words} words of quality content"],
        )

    clean = clean_text(text)
    sentences = split_sentences(clean)
    words = split_words(clean)
    sentence_count = len(sentences)
    word_count = len(words)
    syllable_count = sum(count_syllables(w) for w in words)

    if sentence_count == 0 or word_count == 0:
        return AnalysisResult(
            score=0,
            details={"grade": "Insufficient content", "readingLevel": None, "seoImpact": None},
            metrics={"wordCount": word_count, "sentenceCount": sentence_count},
            recommendations=["Add more structured content with proper sentences"],
        )

    avg_words_per_sentence = word_count / sentence_count
    avg_syllables_per_word = syllable_count / word_count
    score = flesch_reading_ease(word_count, sentence_count, syllable_count)
    grade, reading_level, seo_impact, band_issue = classify_reading_ease(score)

    issues = []
    if band_issue is not None:
        issues.append(band_issue)

    if word_count < min_words:
        issues.append(Issue(
            Priority.HIGH, "Content Length",
            f"Content is too short ({word_count} words)",
            f"Aim for at least {min_words} words. Comprehensive content (1000-2000 words) ranks better"))
    elif word_count < target_words:
        issues.append(Issue(
            Priority.LOW, "Content Length",
            f"Content is minimal ({word_count} words)",
            "Consider expanding to 1000-2000 words for better ranking potential"))

    if avg_words_per_sentence > long_sentence_words:
        issues.append(Issue(
            Priority.MEDIUM, "Readability",
            f"Average sentence length too long ({avg_words_per_sentence:.1f} words)",
            "Keep sentences under 20 words for better readability"))

    very_short = sum(1 for s in sentences if len(s.split()) < 5)
    if very_short > sentence_count * 0.5:
        issues.append(Issue(
            Priority.LOW, "Content Quality",
            "Too many very short sentences",
            "Vary sentence length to improve flow and engagement"))

    recommendations = []
    if score < 60:
        recommendations.append("Use shorter sentences (15-20 words average)")
        recommendations.append("Replace complex words with simpler alternatives")
        recommendations.append("Break long paragraphs into 2-3 sentences each")
    if word_count < target_words:
        recommendations.append("Expand content to 1000-2000 words for better SEO performance")
    if avg_words_per_sentence > 20:
        recommendations.append("Break long sentences into multiple shorter ones")
    recommendations.extend(STRUCTURE_RECOMMENDATIONS)

    return AnalysisResult(
        score=_round_half_up(score),
        details={"grade": grade, "readingLevel": reading_level, "seoImpact": seo_impact},
        metrics={
            "wordCount": word_count,
            "sentenceCount": sentence_count,
            "syllableCount": syllable_count,
            "avgWordsPerSentence": round(avg_words_per_sentence, 1),
            "avgSyllablesPerWord": round(avg_syllables_per_word, 2),
            "paragraphCount": count_paragraphs(text),
        },
        issues=issues,
        recommendations=recommendations,
    )
