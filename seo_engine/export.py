from __future__ import annotations

import csv
import json
from typing import Any, Dict, List

ISSUE_FIELDNAMES = ['analyzer', 'priority', 'category', 'issue', 'recommendation']


def export_issues_csv(path: str, issues: List[Dict[str, Any]]):
    # header is written even when there are no issues
    with open(path, 'w', newline='') as f:
        w = csv.DictWriter(f, fieldnames=ISSUE_FIELDNAMES)
        w.writeheader()
        for i in issues:
            w.writerow({k: i.get(k) for k in ISSUE_FIELDNAMES})


def export_report_json(path: str, report: Dict[str, Any]):
    with open(path, 'w') as f:
        json.dump(report, f, indent=4)


def render_report_text(report: Dict[str, Any]) -> str:
    lines = [f"SEO report for {report.get('target_url')}"]
    if report.get('analysis_timestamp'):
        lines.append(f"Generated: {report['analysis_timestamp']}")
    if report.get('error'):
        lines.append(f"Error: {report['error'].get('message')}")
    for name, result in report.get('seo_attributes', {}).items():
        lines.append("")
        lines.append(f"[{name}] score {result.get('score')}/100")
        for issue in result.get('issues', []):
            lines.append(f"  - ({issue['priority']}) {issue['category']}: {issue['issue']}")
            lines.append(f"      fix: {issue['recommendation']}")
        for rec in result.get('recommendations', []):
            lines.append(f"  * {rec}")
    return "\n".join(lines) + "\n"


def export_report_text(path: str, report: Dict[str, Any]):
    with open(path, 'w') as f:
        f.write(render_report_text(report))
