from typing import Any, Dict

from pydantic import BaseModel, Field

TEMPLATE_MARKER = "["
OUTPUT_EXTENSION = ".html"


class Page(BaseModel):
    """One content page flowing through the build."""

    metadata: Dict[str, Any] = Field(default_factory=dict)
    body: str  # raw markup-with-components, without front matter
    output_name: str  # file name under the output directory, e.g. ``guide.html``

    @property
    def is_template(self) -> bool:
        return self.output_name.startswith(TEMPLATE_MARKER)
