"""site_sketch.report: форматтеры итогового документа и запись результата."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Union

import click

from site_sketch.exceptions import OutputWriteError
from site_sketch.report.base import Formatter
from site_sketch.report.json_report import JsonFormatter
from site_sketch.report.markdown import MarkdownFormatter
from site_sketch.report.prompt import PromptFormatter

FORMATTERS: Dict[str, type[Formatter]] = {
    "prompt": PromptFormatter,
    "markdown": MarkdownFormatter,
    "json": JsonFormatter,
}


def get_formatter(name: str, template_dir: Union[str, Path, None] = None) -> Formatter:
    """Возвращает форматтер по имени; для неизвестного имени ValueError."""
    try:
        formatter_cls = FORMATTERS[name]
    except KeyError:
        raise ValueError(f"Неизвестный формат вывода: {name}") from None
    return formatter_cls(template_dir=template_dir)


def write_output(text: str, path: Union[str, Path, None]) -> Optional[Path]:
    """Пишет документ в файл (создавая каталоги) или в stdout, если путь не задан."""
    if path is None:
        click.echo(text)
        return None
    p = Path(path)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(str(p), exc.strerror or str(exc)) from exc
    return p


__all__ = ["FORMATTERS", "Formatter", "get_formatter", "write_output"]
