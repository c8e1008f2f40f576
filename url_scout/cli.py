# === FILE: url_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска UrlScout через командную строку.

Команды:
  extract   Извлечь URL из HTML-файла (или stdin) и вывести/сохранить отчёты
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (по умолчанию встроенные значения)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования

Команда extract опции:
  --home-url URL            Абсолютный URL сайта
  --alternate-domain D      Дополнительный локальный домен или /regex/ (можно повторять)
  --files-only              Только URL файлов
  --ignore-ext EXT          Исключаемое расширение (можно повторять)
  --attribute NAME          Читаемый атрибут (можно повторять, заменяет список)
  --absolute                Вывести только URL, по одному на строку
  --json PATH               Сохранить JSON-отчёт в файл
  --html PATH               Сохранить HTML-отчёт в файл
  --template DIR            Папка с Jinja2-шаблонами
  --pretty                  Преформатировать JSON-вывод (отступ 2)

Пример:
  url-scout extract page.html --home-url https://example.com --files-only --pretty
"""
import json
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from url_scout import __version__
from url_scout.config import load_config
from url_scout.extractor import UrlExtractor
from url_scout.logger import get_logger, init_logging
from url_scout.report.html_report import render_html
from url_scout.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])

log = get_logger(__name__)


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='UrlScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML или JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд UrlScout CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    log.info('Конфигурация загружена: %s', config_path or 'defaults')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('extract', context_settings=CONTEXT_SETTINGS)
@click.argument('source', type=click.File('rb'))
@click.option('--home-url', 'home_url', default=None, help='Абсолютный URL сайта')
@click.option(
    '--alternate-domain', 'alternate_domains',
    multiple=True,
    help='Дополнительный локальный домен или /regex/'
)
@click.option(
    '--files-only/--all-urls', 'files_only',
    default=None,
    help='Оставить только URL файлов'
)
@click.option(
    '--ignore-ext', 'ignored_extensions',
    multiple=True,
    help='Исключаемое расширение файла'
)
@click.option(
    '--attribute', '-a', 'attributes',
    multiple=True,
    help='HTML-атрибут для чтения (заменяет список по умолчанию)'
)
@click.option('--absolute', is_flag=True, help='Вывести только URL, по одному на строку')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблонами'
)
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-вывод (отступ 2)')
@click.pass_context
def extract(ctx, source, home_url, alternate_domains, files_only, ignored_extensions,
            attributes, absolute, json_output, html_output, template_dir, pretty):
    """Извлечь URL из HTML-документа SOURCE ('-' для stdin)."""
    changes = {}
    if home_url is not None:
        changes['home_url'] = home_url
    if alternate_domains:
        changes['alternate_domains'] = alternate_domains
    if files_only is not None:
        changes['files_only'] = files_only
    if ignored_extensions:
        changes['ignored_extensions'] = ignored_extensions
    if attributes:
        changes['attribute_filter'] = attributes

    try:
        cfg = ctx.obj['config'].replace(**changes)
    except ValidationError as e:
        print_error(f'Некорректные параметры: {e}')

    # raw bytes: BeautifulSoup detects the document encoding itself
    urls = UrlExtractor(source.read(), cfg).get_urls()

    if absolute:
        for item in urls:
            click.echo(item.url if item.url is not None else item.value)
        return

    # Если не сохраняем в файл, печатаем в stdout
    if not json_output and not html_output:
        indent = 2 if pretty else None
        click.echo(json.dumps([u.to_dict() for u in urls], ensure_ascii=False, indent=indent))
        return

    if json_output:
        try:
            saved_json = render_json(urls, json_output)
            click.echo(f'JSON report: {saved_json}')
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(urls, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
