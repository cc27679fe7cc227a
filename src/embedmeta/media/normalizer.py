# ABOUTME: Producer-side construction of MetadataRecord instances.
# ABOUTME: Pre-fills canonical defaults and applies a vocabulary's correspondences.

import logging
from collections.abc import Mapping
from typing import Any

from embedmeta.media.types import MetadataRecord
from embedmeta.media.vocabulary import correspondences_for, default_properties

logger = logging.getLogger(__name__)


def build_correspondences(
    vocabulary: str | None = None,
    correspondences: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Combine a named vocabulary table with caller-supplied correspondences.

    Caller pairs come after the vocabulary's, so they win when both target
    the same property.

    Raises:
        UnknownVocabularyError: If the vocabulary name is not registered.
    """
    table: dict[str, str] = {}
    if vocabulary:
        table.update(correspondences_for(vocabulary))
    if correspondences:
        for source, destination in correspondences.items():
            # Re-insert so a caller override also moves to the end of the table.
            table.pop(source, None)
            table[source] = destination
    return table


def normalize_media(
    raw: Mapping[str, Any],
    correspondences: Mapping[str, str] | None = None,
    *,
    vocabulary: str | None = None,
    fill_defaults: bool = True,
) -> MetadataRecord:
    """Build a MetadataRecord from a provider's raw property set.

    With fill_defaults, every canonical property starts out as an empty
    string and raw values are laid over it, so consumers can rely on the
    canonical names being present. Canonical properties keep their canonical
    order; provider extras follow in their original order.

    Args:
        raw: Property set in the provider's own vocabulary.
        correspondences: Extra source-to-canonical name mappings.
        vocabulary: Name of a registered vocabulary ("oembed", "opengraph").
        fill_defaults: Pre-populate the canonical properties.

    Raises:
        UnknownVocabularyError: If the vocabulary name is not registered.
    """
    table = build_correspondences(vocabulary, correspondences)

    if fill_defaults:
        prepared: dict[str, Any] = default_properties()
        prepared.update(raw)
    else:
        prepared = dict(raw)

    logger.debug(
        "Normalizing %d properties with %d correspondences (vocabulary=%s)",
        len(raw),
        len(table),
        vocabulary or "none",
    )
    return MetadataRecord(prepared, table)
