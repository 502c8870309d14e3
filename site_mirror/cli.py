# === FILE: site_mirror/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска SiteMirror через командную строку.

Использование:
  site-mirror URL [OUTPUT_DIR] [-r]

Аргументы:
  URL                 Стартовый абсолютный http(s) URL
  OUTPUT_DIR          Корень зеркала (default: текущий каталог, создаётся при отсутствии)

Опции:
  -r, --recursive     Рекурсивно скачивать ссылки и ресурсы того же хоста
  --config PATH       YAML/JSON файл с настройками (аргументы CLI важнее)
  --timeout SEC       Таймаут одного запроса (секунд)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --log-format FORMAT Формат логирования
  --version, -v       Показать версию SiteMirror

Пример:
  site-mirror https://example.com/docs/ mirror -r
"""
import asyncio
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click

from site_mirror import __version__
from site_mirror.config import load_config
from site_mirror.engine import start_mirror
from site_mirror.logger import DEFAULT_FORMAT, init_logging

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str) -> NoReturn:
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteMirror, version %(version)s')
@click.argument('url')
@click.argument(
    'output_dir',
    required=False,
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option(
    '--recursive', '-r', 'recursive',
    is_flag=True,
    help='Рекурсивно скачивать ссылки и ресурсы того же хоста'
)
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--timeout', 'timeout',
    type=float,
    default=None,
    help='Таймаут одного запроса (секунд)'
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
    help='Путь к файлу логов (stdout, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
def cli(
    url: str,
    output_dir: Optional[Path],
    recursive: bool,
    config_path: Optional[Path],
    timeout: Optional[float],
    log_level: str,
    log_file: Optional[Path],
    log_format: str,
):
    """Скачать URL в локальное зеркало (с -r: весь сайт того же хоста)."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(
            config_path,
            seed_url=url,
            output_dir=output_dir,
            recursive=True if recursive else None,
            timeout=timeout,
        )
    except Exception as e:
        print_error(f'Ошибка конфигурации: {e}')

    try:
        result = asyncio.run(start_mirror(cfg))
    except Exception as e:
        print_error(f'Ошибка при зеркалировании: {e}')

    click.echo(f'Saved {len(result.saved)} file(s), {len(result.failed)} failed')
    click.echo(f'Mirror: {cfg.output_dir}')


if __name__ == "__main__":
    cli()
