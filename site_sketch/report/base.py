"""site_sketch.report.base: общий интерфейс форматтеров и окружение Jinja2."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, StrictUndefined

from site_sketch.aggregator import CrawlReport


def template_environment(template_dir: Union[str, Path, None] = None) -> Environment:
    """Окружение Jinja2: шаблоны из template_dir (если задан) перекрывают встроенные."""
    loaders = []
    if template_dir is not None:
        loaders.append(FileSystemLoader(str(template_dir)))
    loaders.append(PackageLoader("site_sketch", "templates"))
    # HTML страниц вставляется в текст как есть, поэтому без autoescape
    return Environment(
        loader=ChoiceLoader(loaders),
        autoescape=False,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


class Formatter(ABC):
    """Стратегия превращения CrawlReport в текстовый документ."""

    name: str = ""

    def __init__(self, template_dir: Union[str, Path, None] = None) -> None:
        self.template_dir: Optional[Path] = Path(template_dir) if template_dir else None

    @abstractmethod
    def render(self, report: CrawlReport) -> str:
        ...
