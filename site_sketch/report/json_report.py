# site_sketch/report/json_report.py

"""
Генерация JSON-отчёта для проекта SiteSketch.

Сериализация объекта CrawlReport: стартовый URL, подсказка об авторизации
и страницы, отсортированные по пути.
"""
from site_sketch.aggregator import CrawlReport
from site_sketch.report.base import Formatter


class JsonFormatter(Formatter):
    """JSON с отступами и Unicode; шаблоны не используются."""

    name = "json"

    def render(self, report: CrawlReport) -> str:
        return report.json(pretty=True)
