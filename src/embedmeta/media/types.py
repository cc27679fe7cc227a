# ABOUTME: MetadataRecord, the normalized key-value record for embeddable media metadata.
# ABOUTME: Remaps provider field names onto canonical names once, at construction time.

import logging
import warnings
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

logger = logging.getLogger(__name__)


def reindex(
    properties: Mapping[str, Any], correspondences: Mapping[str, str]
) -> dict[str, Any]:
    """Copy values from source keys onto destination keys.

    Pairs are applied in the table's iteration order, reading from the
    original ``properties`` rather than the partially built result. Source
    keys are kept, so both names are present when they differ. When several
    pairs target the same destination the last one wins. Pairs whose source
    is missing are skipped.

    Args:
        properties: Raw property set, indexed by the producer's field names.
        correspondences: Table of the form ``{"current_name": "new_name"}``.

    Returns:
        A new dict; neither argument is modified.
    """
    result = dict(properties)

    for source, destination in correspondences.items():
        if source not in properties:
            logger.debug("No value for %r, skipping mapping to %r", source, destination)
            continue
        result[destination] = properties[source]

    return result


class MetadataRecord:
    """Metadata about an embeddable media, indexed by property name.

    Whichever provider produced it, a record exposes the same canonical
    property names (see ``embedmeta.media.vocabulary.CANONICAL_PROPERTIES``)
    alongside any provider-specific extras. Producers are expected to fill the
    canonical properties before adding their own; construction itself never
    inserts defaults, so an unset property is reported as absent.

    The record is not thread-safe.
    """

    def __init__(
        self,
        properties: Mapping[str, Any],
        correspondences: Mapping[str, str] | None = None,
    ) -> None:
        if correspondences:
            self._properties = reindex(properties, correspondences)
        else:
            self._properties = dict(properties)

    def has(self, name: str) -> bool:
        """Whether a value is stored for the property, even an empty one."""
        return name in self._properties

    def get(self, name: str) -> Any | None:
        """Return the property value, or None if the property is not set."""
        return self._properties.get(name)

    def set(self, name: str, value: Any) -> None:
        """Set the property value, creating the property if needed."""
        self._properties[name] = value

    @property
    def properties(self) -> Mapping[str, Any]:
        """Read-only live view of the stored properties."""
        return MappingProxyType(self._properties)

    def to_dict(self) -> dict[str, Any]:
        """Detached copy of the stored properties, in insertion order."""
        return dict(self._properties)

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        # Pairs are captured when the first one is requested, so a set()
        # during the loop neither breaks it nor shows up in it.
        yield from list(self._properties.items())

    def __contains__(self, name: object) -> bool:
        return name in self._properties

    def __len__(self) -> int:
        return len(self._properties)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MetadataRecord):
            return NotImplemented
        return self._properties == other._properties

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._properties!r})"

    # Deprecated aliases. Defined last: the `property` alias shadows the
    # builtin decorator for the rest of the class body.

    def has_property(self, name: str) -> bool:
        """Deprecated alias for has()."""
        _warn_deprecated("has_property", "has")
        return self.has(name)

    def set_property(self, name: str, value: Any) -> None:
        """Deprecated alias for set()."""
        _warn_deprecated("set_property", "set")
        self.set(name, value)

    def property(self, name: str) -> Any | None:
        """Deprecated alias for get()."""
        _warn_deprecated("property", "get")
        return self.get(name)


def _warn_deprecated(old: str, new: str) -> None:
    warnings.warn(
        f"MetadataRecord.{old}() is deprecated, use {new}() instead",
        DeprecationWarning,
        stacklevel=3,
    )
