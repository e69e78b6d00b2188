# === FILE: site_sketch/config.py ===
"""
Модуль для загрузки и валидации конфигурации краулера SiteSketch.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

DEFAULT_USER_AGENT = "SiteSketch/1.0 (for testing purposes; contact: your.email@example.com)"

OutputFormat = Literal["prompt", "markdown", "json"]


class CrawlerConfig(BaseModel):
    """Конфигурация для одного запуска обхода."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    # Стартовый URL хранится как есть: сравнение посещённых URL идёт по сырой строке.
    start_url: Optional[str] = Field(None, description="Стартовый URL обхода.")
    batch_size: int = Field(10, ge=1, description="Число URL, загружаемых параллельно в одном пакете.")
    max_pages: int = Field(50, ge=1, description="Жесткий лимит по числу посещённых страниц.")
    max_queue_size: int = Field(1000, ge=1, description="Максимальная длина очереди ожидания.")
    timeout: float = Field(10.0, gt=0, description="Таймаут на один запрос (секунд).")
    request_delay: float = Field(0.1, ge=0, description="Пауза перед каждым запросом (секунд).")
    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1, description="Заголовок User-Agent.")
    silent: bool = Field(False, description="Подавить журнал выполнения.")
    output_format: OutputFormat = Field("prompt", description="Формат итогового документа.")


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> CrawlerConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект CrawlerConfig.
    Без пути использует configs/default.yaml, а если его нет, значения по умолчанию.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return CrawlerConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return CrawlerConfig(**data)


def with_overrides(config: CrawlerConfig, **overrides: Any) -> CrawlerConfig:
    """Возвращает копию конфига, заменяя только явно заданные (не None) значения."""
    update = {k: v for k, v in overrides.items() if v is not None}
    if not update:
        return config
    # model_copy не валидирует, поэтому пересобираем модель целиком
    return CrawlerConfig(**{**config.model_dump(), **update})


__all__ = ["CrawlerConfig", "OutputFormat", "load_config", "with_overrides", "ValidationError"]
