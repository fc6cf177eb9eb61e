"""Minimal HTML page shell shared by the host pages."""

from html import escape

PAGE_HTML = """<!DOCTYPE html>
<html lang="{lang}">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title} | {site_name}</title>
</head>
<body>
    <main id="main">
        <h1>{title}</h1>
        {body}
    </main>
</body>
</html>
"""


def render_page(title: str, body: str, site_name: str, lang: str = "en") -> str:
    """Wrap already-rendered body markup in the page shell.

    ``title`` and ``site_name`` are escaped here; ``body`` is inserted as is.
    """
    return PAGE_HTML.format(
        lang=escape(lang),
        title=escape(title),
        site_name=escape(site_name),
        body=body,
    )
