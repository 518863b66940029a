"""Export search results to JSON, CSV or Markdown."""

import csv
import io
import json
from pathlib import Path
from typing import Any, Dict, List

CSV_FIELDS = ['domain', 'name', 'tld', 'score', 'grade', 'status', 'available', 'method', 'cached', 'error']


def _rows(results) -> List[Dict[str, Any]]:
    rows = []
    for r in results.results:
        rows.append({
            'domain': r.domain,
            'name': r.name,
            'tld': r.tld,
            'score': r.score,
            'grade': r.suggestion.scoring.grade,
            'status': r.availability.status,
            'available': r.availability.available,
            'method': r.availability.method,
            'cached': r.availability.cached,
            'error': r.availability.error or '',
        })
    return rows


def to_json(results) -> str:
    """Serialize SearchResults to a JSON document."""
    data = {
        'query': results.query,
        'timestamp': results.timestamp.isoformat(),
        'summary': results.summary.to_dict(),
        'suggestions': [s.to_dict() for s in results.suggestions],
        'results': [r.to_dict() for r in results.results],
    }
    return json.dumps(data, indent=2)


def to_csv(results) -> str:
    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=CSV_FIELDS)
    writer.writeheader()
    writer.writerows(_rows(results))
    return output.getvalue()


def _format_available(value) -> str:
    if value is True:
        return 'yes'
    if value is False:
        return 'no'
    return '?'


def to_markdown(results) -> str:
    summary = results.summary
    lines = [
        f"# Domain search: {results.query}",
        "",
        f"Checked {summary.total_checked} domains in {summary.duration:.1f}s: "
        f"{summary.available} available, {summary.registered} registered, {summary.unknown} unknown. "
        f"Average score {summary.average_score}.",
        "",
        "| Domain | Score | Grade | Available | Method |",
        "|---|---|---|---|---|",
    ]
    for row in _rows(results):
        lines.append(
            f"| {row['domain']} | {row['score']} | {row['grade']} | "
            f"{_format_available(row['available'])} | {row['method']} |"
        )
    return "\n".join(lines) + "\n"


FORMATS = {
    '.json': to_json,
    '.csv': to_csv,
    '.md': to_markdown,
    '.markdown': to_markdown,
}


def save(results, output_file: str) -> Path:
    """Write results in the format implied by the file extension.

    Raises:
        ValueError: for an unsupported extension
    """
    output_path = Path(output_file)
    render = FORMATS.get(output_path.suffix.lower())
    if render is None:
        raise ValueError(
            f"Unsupported export format '{output_path.suffix}' (use one of {', '.join(sorted(FORMATS))})"
        )

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', newline='') as f:
        f.write(render(results))
    return output_path
