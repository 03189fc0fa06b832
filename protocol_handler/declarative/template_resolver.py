from __future__ import annotations

import re
from urllib.parse import urlsplit

from protocol_handler.registry.resolver import Resolver

TEMPLATE_VARIABLES: frozenset[str] = frozenset(
    {"url", "scheme", "host", "path", "query", "fragment", "rest"}
)


def url_template_context(url: str) -> dict[str, str]:
    """Split ``url`` into the variables a target template can use."""
    stripped: str = url.strip()
    parts = urlsplit(stripped)

    _, _, rest = stripped.partition(":")
    if rest.startswith("//"):
        rest = rest[2:]

    return {
        "url": stripped,
        "scheme": parts.scheme,
        "host": parts.netloc,
        "path": parts.path,
        "query": parts.query,
        "fragment": parts.fragment,
        "rest": rest,
    }


class TemplateResolver(Resolver):
    """
    Resolves URLs by rendering a ``{{ variable }}`` target template.

    Example:
        TemplateResolver("https://{{ host }}.s3.amazonaws.com{{ path }}")
    """

    TEMPLATE_VARIABLE_PATTERN: re.Pattern[str] = re.compile(
        r"\{\{(.+?)\}\}"
    )

    def __init__(self, template: str) -> None:
        if not template:
            raise ValueError("Target template must not be empty")
        self._template: str = template

    @property
    def template(self) -> str:
        return self._template

    @classmethod
    def variables_in(cls, template: str) -> list[str]:
        return [
            match.group(1).strip()
            for match in cls.TEMPLATE_VARIABLE_PATTERN.finditer(
                template
            )
        ]

    def resolve(self, url: str) -> str:
        if "{{" not in self._template:
            return self._template

        context: dict[str, str] = url_template_context(url)

        def replace_variable_reference(
            match: re.Match[str],
        ) -> str:
            return context.get(match.group(1).strip(), "")

        return self.TEMPLATE_VARIABLE_PATTERN.sub(
            replace_variable_reference, self._template
        )

    def describe(self) -> str:
        return f"TemplateResolver({self._template!r})"
