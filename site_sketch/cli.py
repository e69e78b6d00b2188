# === FILE: site_sketch/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска краулера SiteSketch через командную строку.

Команды:
  crawl URL   Обойти сайт (только хост URL) и вывести/сохранить документ
  config      Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (по умолчанию configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (только stderr, если не указан)
  --log-format FORMAT Формат логирования

Команда crawl опции:
  --batch-size, -b N  Число URL в одном параллельном пакете (default 10)
  --max-pages, -m N   Макс. число страниц (default 50)
  --output, -o PATH   Сохранить документ в файл (stdout, если не указан)
  --silent, -s        Не выводить журнал выполнения
  --format, -f NAME   prompt | markdown | json
  --template, -t DIR  Папка с Jinja2-шаблонами, перекрывающими встроенные

Пример:
  site-sketch crawl https://example.com -b 5 -m 100 -o prompt.md
"""
import sys
from pathlib import Path

import click

from site_sketch import __version__
from site_sketch.config import load_config, with_overrides
from site_sketch.engine import Engine
from site_sketch.exceptions import SiteSketchError
from site_sketch.logger import DEFAULT_FORMAT, configure
from site_sketch.report import FORMATTERS, write_output

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteSketch, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (только stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд SiteSketch CLI."""
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    configure(
        level=log_level,
        silent=cfg.silent,
        log_file=str(log_file) if log_file else None,
        log_format=log_format,
    )
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg
    ctx.obj['logging'] = dict(level=log_level, log_file=log_file, log_format=log_format)


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.option('--batch-size', '-b', 'batch_size', type=click.IntRange(min=1), default=None,
              help='Число URL в одном параллельном пакете [10]')
@click.option('--max-pages', '-m', 'max_pages', type=click.IntRange(min=1), default=None,
              help='Макс. число страниц для обхода [50]')
@click.option(
    '--output', '-o', 'output',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Сохранить документ в файл'
)
@click.option('--silent', '-s', is_flag=True, help='Не выводить журнал выполнения')
@click.option('--format', '-f', 'output_format', type=click.Choice(sorted(FORMATTERS)), default=None,
              help='Формат документа [prompt]')
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблонами'
)
@click.pass_context
def crawl(ctx, url, batch_size, max_pages, output, silent, output_format, template_dir):
    """Обойти сайт и сгенерировать документ."""
    cfg = with_overrides(
        ctx.obj['config'],
        start_url=url,
        batch_size=batch_size,
        max_pages=max_pages,
        silent=silent or None,
        output_format=output_format,
    )
    if cfg.silent != ctx.obj['config'].silent:
        log_opts = ctx.obj['logging']
        configure(
            level=log_opts['level'],
            silent=cfg.silent,
            log_file=str(log_opts['log_file']) if log_opts['log_file'] else None,
            log_format=log_opts['log_format'],
        )

    engine = Engine(cfg)
    try:
        text = engine.execute(template_dir)
    except Exception as e:
        print_error(f'Error during crawling: {e}')

    try:
        saved = write_output(text, output)
    except SiteSketchError as e:
        print_error(str(e))
    if saved is not None and not cfg.silent:
        click.echo(f'Output saved to: {saved}', err=True)


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
