"""Body extraction for pasting into an email composer.

Email clients expect the signature markup alone; pasting the full document
drags the <html>/<head>/<body> wrappers along with it.
"""

import re

_BODY_RE = re.compile(r"<body[^>]*>(.*?)</body>", re.IGNORECASE | re.DOTALL)


def extract_main_content(html: str) -> str:
    """Return the inner content of the document body.

    Args:
        html: Full HTML document

    Returns:
        Stripped body content, or the input unchanged if there is no
        body element or it is empty

    Examples:
        >>> extract_main_content("<html><body> <div>hi</div> </body></html>")
        '<div>hi</div>'
        >>> extract_main_content("<div>hi</div>")
        '<div>hi</div>'
    """
    match = _BODY_RE.search(html)
    if match is None or not match.group(1):
        return html

    return match.group(1).strip()
