# url_scout/report/json_report.py

"""
Генерация JSON-отчёта для проекта UrlScout.

Сериализация списка ExtractedUrl в файл.
"""
import json
from pathlib import Path
from typing import Iterable

from url_scout.models import ExtractedUrl


def render_json(urls: Iterable[ExtractedUrl], output_path: Path | str) -> Path:
    """
    Сохраняет извлечённые URL в формате JSON по указанному пути.

    :param urls: записи ExtractedUrl в порядке документа
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла

    Пример:
    ```python
    from url_scout.report.json_report import render_json
    report_path = render_json(extractor.get_urls(), 'reports/urls.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    data = [item.to_dict() for item in urls]

    with output.open('w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return output
