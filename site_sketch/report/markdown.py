"""site_sketch.report.markdown: Markdown-выгрузка всех страниц."""

from __future__ import annotations

from site_sketch.aggregator import CrawlReport
from site_sketch.report.base import Formatter, template_environment


class MarkdownFormatter(Formatter):
    name = "markdown"
    template_name = "pages.md.j2"

    def render(self, report: CrawlReport) -> str:
        template = template_environment(self.template_dir).get_template(self.template_name)
        return template.render(
            base_url=report.start_url,
            auth_details=report.auth_details,
            pages=report.pages,
        )
