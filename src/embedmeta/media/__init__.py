# ABOUTME: Media package for normalized embeddable media metadata.
# ABOUTME: Exports MetadataRecord and the helpers producers use to build one.

from embedmeta.media.normalizer import build_correspondences, normalize_media
from embedmeta.media.types import MetadataRecord, reindex
from embedmeta.media.vocabulary import (
    CANONICAL_PROPERTIES,
    OEMBED_CORRESPONDENCES,
    OPENGRAPH_CORRESPONDENCES,
    UnknownVocabularyError,
    correspondences_for,
    default_properties,
)

__all__ = [
    "CANONICAL_PROPERTIES",
    "OEMBED_CORRESPONDENCES",
    "OPENGRAPH_CORRESPONDENCES",
    "MetadataRecord",
    "UnknownVocabularyError",
    "build_correspondences",
    "correspondences_for",
    "default_properties",
    "normalize_media",
    "reindex",
]
