"""site_sketch.report.prompt: промпт для генерации тестов Scythe по результатам обхода."""

from __future__ import annotations

from site_sketch.aggregator import CrawlReport, build_page_sections
from site_sketch.report.base import Formatter, template_environment

BLANK_PLACEHOLDER = "[Leave blank if not needed]"
DEFAULT_BEHAVIOR = "HumanBehavior(base_delay=2.0, typing_delay=0.1)"


class PromptFormatter(Formatter):
    """Заполняет шаблон scythe_prompt.md.j2."""

    name = "prompt"
    template_name = "scythe_prompt.md.j2"

    def render(self, report: CrawlReport) -> str:
        template = template_environment(self.template_dir).get_template(self.template_name)
        return template.render(
            base_url=report.start_url,
            auth_details=report.auth_details,
            proxies=BLANK_PLACEHOLDER,
            credentials=BLANK_PLACEHOLDER,
            behavior_pattern=DEFAULT_BEHAVIOR,
            page_sections=build_page_sections(report.pages),
        )
