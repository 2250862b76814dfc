"""Report generation for WAVE analysis results.

Renders an ``AnalysisResult`` in multiple formats:
- Text: console-friendly summary
- Markdown: human-readable documentation
- JSON: the validated API payload plus a summary block
"""

import json
from typing import Optional, List, Union
from datetime import datetime, timezone
from pathlib import Path

from wave_client import __version__
from wave_client.core.config import OutputFormat, ReportConfig
from wave_client.core.models import AnalysisResult, WaveItem, CATEGORY_NAMES, field_value


CATEGORY_TITLES = {
    "error": "Errors",
    "alert": "Alerts",
    "feature": "Features",
    "structure": "Structure",
    "aria": "ARIA",
    "contrast": "Contrast",
}

STAT_LABELS = (
    ("Analysis Time", "time"),
    ("Credits Remaining", "creditsremaining"),
    ("Total Elements", "totalelements"),
)


def describe_contrast(item: WaveItem) -> Optional[str]:
    """One-line description of the first contrast entry of an item."""
    if not item.contrastdata:
        return None

    first = item.contrastdata[0]
    if not isinstance(first, (list, tuple)):
        text = (
            f"{field_value(first, 'fcolor')} on {field_value(first, 'bcolor')}, "
            f"ratio {field_value(first, 'contrastratio')}"
        )
        if field_value(first, "fontsize"):
            weight = field_value(first, "fontweight") or ""
            text += f", font {field_value(first, 'fontsize')} {weight}".rstrip()
        return text

    # Positional form: [ratio, foreground, background, large text]
    return ", ".join(str(part) for part in first)


def _wcag_ref(reference) -> str:
    name = field_value(reference, "name")
    link = field_value(reference, "link")
    return f"[{name}]({link})" if link else str(name)


class Reporter:
    """Generate analysis reports in multiple formats."""

    def __init__(self, config: Optional[ReportConfig] = None):
        self.config = config or ReportConfig()

    def generate(
        self,
        result: AnalysisResult,
        format: Optional[OutputFormat] = None,
    ) -> str:
        """Generate report in specified format.

        Args:
            result: Analysis result to report
            format: Output format (default from config)

        Returns:
            Formatted report string
        """
        format = format or self.config.format

        if format == OutputFormat.JSON:
            return self.to_json(result)
        elif format == OutputFormat.MARKDOWN:
            return self.to_markdown(result)
        else:
            return self.to_text(result)

    def to_json(self, result: AnalysisResult) -> str:
        data = result.model_dump(mode="json", exclude_unset=True)

        data["_summary"] = {
            "issue_types": result.summary(),
            "error_instances": result.instance_count("error"),
        }
        data["_metadata"] = {
            "generator": "wave-client",
            "version": __version__,
            "generated_at": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        }

        return json.dumps(data, indent=2, default=str)

    def to_markdown(self, result: AnalysisResult) -> str:
        lines = []

        lines.append("# WAVE Accessibility Report")
        lines.append("")
        lines.append(f"**Page Title:** {result.stat('pagetitle') or 'Unknown'}")
        lines.append(f"**URL:** {result.stat('pageurl') or 'Unknown'}")
        for label, key in STAT_LABELS:
            value = result.stat(key)
            if value is not None:
                lines.append(f"**{label}:** {value}")
        lines.append("")

        lines.append("## Summary")
        lines.append("")
        lines.append("| Category | Types | Instances |")
        lines.append("|----------|-------|-----------|")
        for name in CATEGORY_NAMES:
            lines.append(
                f"| {CATEGORY_TITLES[name]} | {result.issue_types(name)} "
                f"| {result.instance_count(name)} |"
            )
        lines.append("")

        for name in self._detail_categories():
            items = result.category(name)
            if not items:
                continue

            lines.append(f"## {CATEGORY_TITLES[name]}")
            lines.append("")
            for item_id, item in items.items():
                lines.append(f"### {item.description or item_id}")
                lines.append("")
                lines.append(f"- **Type:** `{item_id}`")
                lines.append(f"- **Count:** {item.count or 0}")
                if item.selectors:
                    shown = item.selectors[:self.config.max_selectors]
                    lines.append(f"- **Selectors:** {', '.join(f'`{s}`' for s in shown)}")
                contrast = describe_contrast(item)
                if contrast:
                    lines.append(f"- **Contrast:** {contrast}")
                if item.wcag:
                    refs = [_wcag_ref(w) for w in item.wcag]
                    lines.append(f"- **WCAG:** {', '.join(refs)}")
                lines.append("")

        if not result.category("error"):
            lines.append("No accessibility errors found.")
            lines.append("")

        if result.report_url:
            lines.append("---")
            lines.append("")
            lines.append(f"[View full report]({result.report_url})")

        return "\n".join(lines)

    def to_text(self, result: AnalysisResult) -> str:
        lines = []

        lines.append("BASIC INFORMATION")
        lines.append("-" * 50)
        lines.append(f"Page Title: {result.stat('pagetitle') or 'Unknown'}")
        lines.append(f"URL: {result.stat('pageurl') or 'Unknown'}")
        for label, key in STAT_LABELS:
            value = result.stat(key)
            lines.append(f"{label}: {'-' if value is None else value}")
        lines.append(f"WAVE Report: {result.report_url or '-'}")
        lines.append("")

        lines.append("ACCESSIBILITY SUMMARY")
        lines.append("-" * 50)
        for name in CATEGORY_NAMES:
            lines.append(f"{CATEGORY_TITLES[name]}: {result.issue_types(name)} types found")
        lines.append("")

        for name in self._detail_categories():
            items = result.category(name)
            if not items:
                continue

            lines.append(CATEGORY_TITLES[name].upper())
            lines.append("-" * 50)
            for item_id, item in items.items():
                lines.append(f"* {item.description or item_id}")
                lines.append(f"  Type: {item_id}")
                lines.append(f"  Count: {item.count or 0}")
                if item.selectors:
                    shown = item.selectors[:self.config.max_selectors]
                    more = "..." if len(item.selectors) > len(shown) else ""
                    lines.append(f"  Selectors: {', '.join(str(s) for s in shown)}{more}")
                contrast = describe_contrast(item)
                if contrast:
                    lines.append(f"  Contrast: {contrast}")
                if item.wcag:
                    lines.append(f"  WCAG: {field_value(item.wcag[0], 'name')}")
            lines.append("")

        error_types = result.issue_types("error")
        if error_types == 0:
            lines.append("No accessibility errors found.")
        else:
            lines.append(
                f"Found {error_types} error type{'' if error_types == 1 else 's'} "
                f"with {result.instance_count('error')} total instances."
            )

        return "\n".join(lines)

    def _detail_categories(self) -> List[str]:
        names = ["error", "contrast"]
        if self.config.include_alerts:
            names.append("alert")
        if self.config.include_features:
            names.append("feature")
        return names

    def save(
        self,
        result: AnalysisResult,
        filepath: Union[str, Path],
        format: Optional[OutputFormat] = None,
    ) -> None:
        """Save report to file.

        Args:
            result: Analysis result
            filepath: Output file path
            format: Output format (inferred from extension if not specified)
        """
        filepath = Path(filepath)

        if format is None:
            ext = filepath.suffix.lower()
            if ext == ".json":
                format = OutputFormat.JSON
            elif ext in [".md", ".markdown"]:
                format = OutputFormat.MARKDOWN
            else:
                format = OutputFormat.TEXT

        filepath.write_text(self.generate(result, format), encoding="utf-8")
