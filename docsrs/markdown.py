"""HTML to Markdown conversion for extracted documentation fragments."""

import re

from bs4 import BeautifulSoup
from markdownify import markdownify as md

# rustdoc page chrome that has no meaning outside the browser
CHROME_SELECTORS = ["script", "style", "noscript", "button", "a.anchor", "a.doc-anchor", "rustdoc-toolbar"]


def _code_language(el) -> str:
    classes = el.get('class') or []
    if 'rust' in classes:
        return 'rust'
    code = el.find('code')
    if code is not None:
        for cls in code.get('class') or []:
            if cls.startswith('language-'):
                return cls[len('language-'):]
    return ''


def html_to_markdown(html: str) -> str:
    """Convert an HTML fragment to Markdown with fenced code blocks."""
    if not html or not html.strip():
        return ""

    soup = BeautifulSoup(html, 'html.parser')
    for element in soup.select(", ".join(CHROME_SELECTORS)):
        element.decompose()

    markdown = md(
        str(soup),
        heading_style="ATX",
        bullets="-",
        code_language_callback=_code_language,
    )

    # Clean up excessive whitespace
    markdown = re.sub(r'[ \t]+\n', '\n', markdown)
    markdown = re.sub(r'\n{3,}', '\n\n', markdown)
    return markdown.strip()
