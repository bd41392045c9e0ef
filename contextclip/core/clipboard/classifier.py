"""Content classification for captured clipboard text"""

from .models import ContentType


def detect_content_type(content: str) -> ContentType:
    """
    Classify clipboard text, first matching rule wins

    Args:
        content: Clipboard text

    Returns:
        Content type of the text
    """
    # URL detection
    if content.startswith(('http', 'www')):
        return ContentType.URL

    # Email detection
    if '@' in content and '.' in content and not any(c.isspace() for c in content):
        return ContentType.EMAIL

    # Code detection
    if '{' in content or 'def ' in content or 'func ' in content:
        return ContentType.CODE

    return ContentType.TEXT
