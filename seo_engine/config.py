# seo_engine/config.py
import copy
import json
import logging

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "PageMetaAnalyzer": {
        "title_min_length": 10, "title_max_length": 60,
        "desc_min_length": 50, "desc_max_length": 160,
        "max_alt_penalty": 10,
    },
    "ReadabilityAnalyzer": {"min_words": 300, "target_words": 1000, "long_sentence_words": 25},
    "ImageAnalyzer": {},
    "InternalLinkAnalyzer": {"min_internal_links": 3, "max_internal_links": 100},
    "SocialMetaAnalyzer": {},
    "ReportAggregator": {"workers": 5},
    "Global": {
        "request_timeout": 10,
        "max_redirects": 5,
        "http_retries_total": 2,
        "http_backoff_factor": 0.2,
        "user_agent": "Mozilla/5.0 (compatible; SEOScoringEngine/1.0)",
        "accept_language": "en-US,en;q=0.8",
    },
}


def merge_config(base: dict, overrides: dict) -> dict:
    """Section-by-section shallow merge; returns a new dict."""
    merged = copy.deepcopy(base)
    for key, value in (overrides or {}).items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


def load_config(path=None) -> dict:
    if not path:
        return copy.deepcopy(DEFAULT_CONFIG)
    try:
        with open(path, "r") as f:
            custom_config = json.load(f)
    except FileNotFoundError:
        logger.warning("Config file %s not found. Using default settings.", path)
        return copy.deepcopy(DEFAULT_CONFIG)
    except json.JSONDecodeError as e:
        logger.warning("Error decoding JSON from %s (%s). Using default settings.", path, e)
        return copy.deepcopy(DEFAULT_CONFIG)
    if not isinstance(custom_config, dict):
        logger.warning("Config file %s must hold a JSON object. Using default settings.", path)
        return copy.deepcopy(DEFAULT_CONFIG)
    logger.info("Loaded custom configuration from %s", path)
    return merge_config(DEFAULT_CONFIG, custom_config)
