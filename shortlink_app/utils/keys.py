"""
Key and identifier normalization.

Link keys are persisted URI-decoded and punycode-encoded, so every lookup by a
user-supplied key must go through `normalize_key` first. Skipping it turns
`%F0%9F%94%A5` or `café` into a false "not found".
"""

import re
from urllib.parse import unquote

# Label separators recognised by punycode toASCII: full stop plus the
# ideographic / fullwidth / halfwidth variants.
LABEL_SEPARATORS = re.compile("[.。．｡]")
ACE_PREFIX = "xn--"


def _encode_label(label: str) -> str:
    if label.isascii():
        return label
    return ACE_PREFIX + label.encode("punycode").decode("ascii")


def punycode_encode(value: str) -> str:
    """
    Punycode-encode every non-ASCII label of `value`.

    ASCII labels pass through untouched and nothing is case-folded, so an
    already-encoded value comes back unchanged. In email-like values the part
    before the first `@` is kept as-is and only the next `@`-separated part is
    mapped (anything after a second `@` is dropped, as punycode toASCII does).
    """
    local, sep, rest = value.partition("@")
    if not sep:
        local, rest = "", value
    domain = rest.split("@", 1)[0]
    labels = LABEL_SEPARATORS.split(domain)
    encoded = ".".join(_encode_label(label) for label in labels)
    return f"{local}{sep}{encoded}"


def normalize_key(key: str) -> str:
    """URI-decode then punycode-encode a link key (its stored form)"""
    return punycode_encode(unquote(key))


def strip_workspace_prefix(workspace_id: str, prefix: str = "ws_") -> str:
    """`ws_abc123` -> `abc123`. Ids without the prefix are returned unchanged."""
    return workspace_id.replace(prefix, "", 1)


def clean_prefix(prefix: str) -> str:
    """Drop one leading and one trailing slash: `/foo/` -> `foo`"""
    return re.sub(r"^/|/$", "", prefix)
