"""Report rendering for ranked match results.

Plain-text reports are rendered with Jinja2 using strict undefined checking
so template mistakes fail loudly instead of printing blanks. JSON reports
are serialized directly from the payload dicts.
"""

import json
import logging
from typing import Dict, List

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError

from .models import ReportRenderError

logger = logging.getLogger(__name__)


class ReportRenderer:
    """Renders match reports from templates in jobfit.reporting.report_templates.

    Templates are cached by the Jinja2 environment for reuse across calls.
    """

    def __init__(
        self,
        template_dir: str = "report_templates",
        text_template: str = "match_report.txt.j2",
    ):
        """Initialize the renderer with a Jinja2 environment.

        Args:
            template_dir: Directory name within the jobfit.reporting package
            text_template: Filename of the plain-text report template
        """
        self.text_template_name = text_template

        # Plain-text output, so no HTML escaping
        self.env = Environment(
            loader=PackageLoader("jobfit.reporting", template_dir),
            autoescape=False,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )

        logger.debug(f"Initialized ReportRenderer with templates from {template_dir}")

    def render_text(self, payloads: List[Dict]) -> str:
        """Render a plain-text report for one or more candidates.

        Args:
            payloads: Report payloads from build_match_payload(), one per candidate

        Returns:
            Rendered report text

        Raises:
            ReportRenderError: If the template is missing or rendering fails
        """
        try:
            template = self.env.get_template(self.text_template_name)
            text = template.render(reports=payloads)
        except TemplateError as e:
            error_msg = f"Report rendering failed: {e}"
            logger.error(error_msg, exc_info=True)
            raise ReportRenderError(error_msg) from e

        logger.debug(f"Rendered text report for {len(payloads)} candidates")
        return text


def render_json(payloads: List[Dict]) -> str:
    """Serialize report payloads as a pretty-printed JSON list."""
    return json.dumps(list(payloads), indent=2, ensure_ascii=False)
