# app.py
import argparse
import os
from datetime import datetime
from urllib.parse import urlparse

from seo_engine.config import load_config
from seo_engine.document import parse_document
from seo_engine.export import export_issues_csv, export_report_json, export_report_text
from seo_engine.fetcher import FetchError, PageFetcher
from seo_engine.logging_config import configure_logging
from seo_engine.report import ANALYZER_CLASSES, ReportAggregator, build_report, collect_issues


class SEOAnalyzer:
    def __init__(self, url, output_format="json", config=None, analyzers=None, fetcher=None):
        self.config = config if config else load_config()
        if not self.is_valid_url(url):
            raise ValueError(f"Invalid URL provided: {url}")
        self.url = self.normalize_url(url.strip())
        self.domain = urlparse(self.url).netloc
        self.output_format = output_format
        self.aggregator = ReportAggregator(config=self.config, analyzers=analyzers)
        self.fetcher = fetcher
        self.results = {}
        self.report = {}

    @staticmethod
    def normalize_url(url):
        if not url.startswith(('http://', 'https://')):
            return 'http://' + url
        return url

    @classmethod
    def is_valid_url(cls, url):
        if not url or not isinstance(url, str):
            return False
        url = url.strip()
        if any(ch.isspace() for ch in url):
            return False
        if "://" in url and not url.startswith(('http://', 'https://')):
            return False
        try:
            result = urlparse(cls.normalize_url(url))
            return result.scheme in ('http', 'https') and bool(result.hostname)
        except ValueError:
            return False

    def run_analysis(self, markup=None):
        """
        Fetches (unless markup is supplied), parses and scores the page.

        Fetch failures never escape: they become a failed report with an
        `error` block and no analyzer results.
        """
        self.results = {}
        page_url = self.url
        if markup is None:
            fetcher = self.fetcher or PageFetcher(config=self.config)
            try:
                page = fetcher.fetch(self.url)
            except FetchError as e:
                print(f"Could not fetch {self.url}: {e}")
                self.report = build_report(self.url, {})
                self.report["status"] = "failed_to_fetch_html"
                self.report["error"] = e.to_dict()
                self.report["analysis_timestamp"] = datetime.now().isoformat()
                return self.report
            markup = page.markup
            page_url = page.final_url

        print(f"Starting SEO analysis for: {page_url}")
        document = parse_document(markup)
        self.results = self.aggregator.run(document, page_url)
        self.report = build_report(page_url, self.results)
        self.report["status"] = "completed"
        self.report["analysis_timestamp"] = datetime.now().isoformat()
        print("SEO analysis complete.")
        return self.report

    def save_report_to_file(self, filename_prefix="seo_report"):
        if not os.path.exists("reports"):
            os.makedirs("reports")
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        safe_domain_name = self.domain.replace(".", "_").replace(":", "_")
        filename = f"reports/{filename_prefix}_{safe_domain_name}_{timestamp}.{self.output_format}"
        try:
            if self.output_format == "json":
                export_report_json(filename, self.report)
            else:
                export_report_text(filename, self.report)
            print(f"Report saved to {filename}")
            return filename
        except IOError as e:
            print(f"Error saving report: {e}")
            return None


def print_summary(report):
    print("\n--- Analysis Summary ---")
    print(f"URL Analyzed: {report.get('target_url')}")
    print(f"Timestamp: {report.get('analysis_timestamp')}")
    if report.get("error"):
        print(f"Status: {report.get('status')} ({report['error'].get('message')})")
        return
    for name, result in report.get("seo_attributes", {}).items():
        print(f"{name}: {result.get('score')}/100 ({len(result.get('issues', []))} issues)")


def build_parser():
    parser = argparse.ArgumentParser(description="SEO scoring engine for a single page")
    parser.add_argument("url", help="The page URL to analyze (canonical URL when --html-file is given).")
    parser.add_argument("--html-file", type=str, default=None, help="Read markup from this file instead of fetching the URL.")
    parser.add_argument("--analyzers", nargs="+", default=None, choices=list(ANALYZER_CLASSES),
                        help="Run only these analyzers (default: all).")
    parser.add_argument("--output", choices=["json", "txt"], default="json", help="Output format for the report.")
    parser.add_argument("--config", type=str, default=None, help="Path to a JSON config file.")
    parser.add_argument("--workers", type=int, default=None, help="Threads used to run analyzers concurrently.")
    parser.add_argument("--export-csv", type=str, default=None, help="Write all issues to this CSV file.")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...).")
    parser.add_argument("--no-save", action="store_true", help="Do not write the report under reports/.")
    return parser


def run_cli(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    current_config = load_config(args.config)
    if args.workers is not None:
        current_config.setdefault("ReportAggregator", {})["workers"] = args.workers

    markup = None
    if args.html_file:
        try:
            with open(args.html_file, "r", encoding="utf-8", errors="replace") as f:
                markup = f.read()
        except OSError as e:
            print(f"Error: could not read {args.html_file}: {e}")
            return 1

    try:
        analyzer = SEOAnalyzer(args.url, output_format=args.output, config=current_config, analyzers=args.analyzers)
    except ValueError as ve:
        print(f"Error: {ve}")
        return 1

    report = analyzer.run_analysis(markup=markup)
    print_summary(report)

    if args.export_csv:
        export_issues_csv(args.export_csv, collect_issues(analyzer.results))
        print(f"Issues exported to {args.export_csv}")
    if not args.no_save:
        analyzer.save_report_to_file()
    return 0 if report.get("status") == "completed" else 2


if __name__ == "__main__":
    raise SystemExit(run_cli())
