import datetime
import html
import logging
from typing import Iterable, List, Optional, Tuple

import frontmatter
import markdown
import yaml

from mdblog.exceptions import MalformedFrontMatter

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = ("fenced_code", "tables")

YAML_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class StringDateLoader(yaml.SafeLoader):
    """SafeLoader that leaves timestamp-shaped scalars as strings."""


StringDateLoader.yaml_implicit_resolvers = {
    first_char: [
        (tag, regexp) for tag, regexp in resolvers if tag != YAML_TIMESTAMP_TAG
    ]
    for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class StringDateYAMLHandler(frontmatter.YAMLHandler):
    def load(self, fm, **kwargs):
        kwargs.setdefault("Loader", StringDateLoader)
        return yaml.load(fm, **kwargs)


class ContentParser:
    def __init__(
        self,
        extensions: Optional[Iterable[str]] = None,
        html_policy: str = "trusted",
    ):
        self.extensions = list(DEFAULT_EXTENSIONS if extensions is None else extensions)
        if html_policy not in ("trusted", "escaped"):
            raise ValueError(f"Unknown HTML policy: {html_policy}")
        self.html_policy = html_policy

    def split(self, raw: str, slug: str = "") -> Tuple[dict, str]:
        """Split a content file into its front matter mapping and markdown body."""
        handler = StringDateYAMLHandler()
        if not handler.detect(raw.lstrip()):
            handler = None
        try:
            parsed = frontmatter.loads(raw, handler=handler)
        except (yaml.YAMLError, ValueError) as e:
            raise MalformedFrontMatter(slug, str(e)) from e
        return dict(parsed.metadata or {}), parsed.content

    def render_markdown(self, text: str) -> str:
        """Convert a markdown body to HTML according to the configured policy.

        A fresh converter is built per call so no state leaks between posts;
        the same text always produces the same HTML.
        """
        rendered = markdown.markdown(text, extensions=self.extensions)
        if self.html_policy == "escaped":
            return html.escape(rendered)
        return rendered


def coerce_text(value, default: str, field: str = "", slug: str = "") -> str:
    if value is None:
        return default
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if isinstance(value, (bool, list, tuple, set, dict)):
        logger.debug(
            f"Unexpected {type(value).__name__} for {field or 'field'} in {slug}, using default"
        )
        return default
    text = str(value).strip()
    return text or default


def normalize_tags(value) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple, set)):
        return [str(item) for item in value if item]
    return [str(value)]
