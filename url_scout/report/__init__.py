# File: url_scout/report/__init__.py
"""url_scout.report: Генерация отчётов (JSON и HTML) по извлечённым URL."""

from url_scout.report.html_report import render_html
from url_scout.report.json_report import render_json

__all__ = ["render_json", "render_html"]
