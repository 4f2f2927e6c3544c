"""
HTML cleaning helpers built on nh3
"""
import nh3

# Formatting kept in career descriptions
RICH_TEXT_TAGS = {
    "p",
    "br",
    "b",
    "strong",
    "i",
    "em",
    "ul",
    "ol",
    "li",
    "a",
    "blockquote",
    "pre",
    "code",
}

RICH_TEXT_ATTRIBUTES = {
    "a": {"href", "name", "target", "rel"},
}

# javascript:, data: and friends are dropped from href
LINK_SCHEMES = {"http", "https", "mailto", "tel"}


def strip_tags(value: str) -> str:
    """Remove all markup, dropping script/style bodies entirely"""
    return nh3.clean(value or "", tags=set(), attributes={}).strip()


def clean_rich_text(value: str) -> str:
    """Keep the description allowlist, strip everything else"""
    return nh3.clean(
        value or "",
        tags=RICH_TEXT_TAGS,
        attributes=RICH_TEXT_ATTRIBUTES,
        url_schemes=LINK_SCHEMES,
        link_rel=None,
    )
