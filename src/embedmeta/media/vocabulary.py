# ABOUTME: Canonical property names and correspondence tables for upstream vocabularies.
# ABOUTME: Maps oEmbed and OpenGraph field names onto the names MetadataRecord exposes.

# Canonical properties, gathered from the oEmbed and OpenGraph protocols. These
# names are the contract between producers and consumers: adding one is safe,
# renaming or removing one is not.
CANONICAL_PROPERTIES: tuple[str, ...] = (
    "type",
    "version",
    "title",
    "description",
    "authorName",
    "authorUrl",
    "providerName",
    "providerUrl",
    "cacheAge",
    "thumbnailUrl",
    "thumbnailWidth",
    "thumbnailHeight",
    "html",
    "width",
    "height",
    "url",
)

# oEmbed fields whose name differs from the canonical one. type, version, title,
# description, html, width, height and url are shared as-is.
OEMBED_CORRESPONDENCES: dict[str, str] = {
    "author_name": "authorName",
    "author_url": "authorUrl",
    "provider_name": "providerName",
    "provider_url": "providerUrl",
    "cache_age": "cacheAge",
    "thumbnail_url": "thumbnailUrl",
    "thumbnail_width": "thumbnailWidth",
    "thumbnail_height": "thumbnailHeight",
}
_OEMBED_SHARED = frozenset(CANONICAL_PROPERTIES) - frozenset(OEMBED_CORRESPONDENCES.values())


# Later entries win when two tags target the same property, so og:image:url
# beats og:image and video dimensions beat image dimensions.
OPENGRAPH_CORRESPONDENCES: dict[str, str] = {
    "og:type": "type",
    "og:title": "title",
    "og:description": "description",
    "og:site_name": "providerName",
    "og:image": "thumbnailUrl",
    "og:image:url": "thumbnailUrl",
    "og:image:width": "width",
    "og:image:height": "height",
    "og:video:width": "width",
    "og:video:height": "height",
    "og:url": "url",
}

VOCABULARIES: dict[str, dict[str, str]] = {
    "oembed": OEMBED_CORRESPONDENCES,
    "opengraph": OPENGRAPH_CORRESPONDENCES,
}


class UnknownVocabularyError(ValueError):
    """Raised when a vocabulary name has no correspondence table."""


def default_properties() -> dict[str, str]:
    """Fresh property set with every canonical property set to an empty string."""
    return dict.fromkeys(CANONICAL_PROPERTIES, "")


def correspondences_for(vocabulary: str) -> dict[str, str]:
    """Return a copy of the correspondence table registered under a vocabulary name."""
    try:
        table = VOCABULARIES[vocabulary.lower()]
    except KeyError:
        known = ", ".join(sorted(VOCABULARIES))
        msg = f"unknown vocabulary {vocabulary!r} (expected one of: {known})"
        raise UnknownVocabularyError(msg) from None
    return dict(table)


def source_names(vocabulary: str, canonical: str) -> list[str]:
    """List the names a vocabulary uses for a canonical property, in table order.

    When several names map to the same property the later one takes
    precedence. oEmbed fields that reuse the canonical name verbatim are
    reported under that name.
    """
    table = correspondences_for(vocabulary)
    names = [source for source, destination in table.items() if destination == canonical]
    if vocabulary.lower() == "oembed" and canonical in _OEMBED_SHARED:
        names.insert(0, canonical)
    return names
