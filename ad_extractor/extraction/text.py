"""HTML fragment to plain text conversion for ad descriptions."""

import re
from typing import Optional

BR_TAG_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
# Only tag-shaped markup: "<" directly followed by a name, "/" or "!"
TAG_RE = re.compile(r"</?[A-Za-z!][^>]*>")
# BeautifulSoup serializes &nbsp; back as a raw U+00A0
SPACES_RE = re.compile(r"[ \t\xa0]+")
BLANK_LINES_RE = re.compile(r"\n{3,}")

# Only the entities the ad library markup is known to emit. &amp; goes last so
# a decoded "&lt;" is never decoded a second time.
HTML_ENTITIES = (
    ("&nbsp;", " "),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&amp;", "&"),
)


def normalize_text(fragment: Optional[str]) -> Optional[str]:
    """
    Convert an HTML fragment into clean text.

    <br> tags become newlines, other tags are stripped, a fixed set of entities
    is decoded, runs of spaces/tabs collapse to one space and three or more
    newlines collapse to two. The result is trimmed.

    Tags are stripped before entities are decoded, so escaped text such as
    "2 &lt; 3" comes out as a literal "2 < 3" and is never mistaken for markup.
    """
    if fragment is None:
        return None

    text = BR_TAG_RE.sub("\n", fragment)
    text = TAG_RE.sub("", text)
    for entity, char in HTML_ENTITIES:
        text = text.replace(entity, char)
    text = SPACES_RE.sub(" ", text)
    text = BLANK_LINES_RE.sub("\n\n", text)
    return text.strip()
