"""
First-paragraph excerpts for list views.

``extract_first_paragraph`` is total: any string and any integer length
produce a string no longer than the requested length.
"""
import re

# A blank line, tolerating CRLF line endings.
_PARAGRAPH_BREAK_RE = re.compile(r"\r?\n\r?\n")


def extract_first_paragraph(text: str, max_length: int) -> str:
    """
    Return the first paragraph of *text*, cut to at most *max_length*
    characters.

    A paragraph ends at the first blank line.  When the paragraph is too
    long it is cut at the last whitespace at or before *max_length* so
    words stay whole; a single word longer than the budget is hard-cut.

    >>> extract_first_paragraph("xx xx\\n\\nxxx", 4)
    'xx'
    """
    if max_length <= 0 or not text:
        return ""

    text = text.lstrip("\r\n")
    match = _PARAGRAPH_BREAK_RE.search(text)
    paragraph = text[: match.start()] if match else text

    if len(paragraph) <= max_length:
        return paragraph

    # Index max_length itself may be the space right after a word that fits.
    window = paragraph[: max_length + 1]
    for index in range(len(window) - 1, 0, -1):
        if window[index].isspace():
            excerpt = paragraph[:index].rstrip()
            if excerpt:
                return excerpt
            break
    return paragraph[:max_length]
