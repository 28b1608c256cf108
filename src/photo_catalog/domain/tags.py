"""Tag value objects attached to photos."""

from dataclasses import dataclass

LOCATION_TAG = "location"


@dataclass(frozen=True)
class Tag:
    """Immutable name/value pair, e.g. ``location:Paris`` or ``person:Alice``."""

    name: str
    value: str

    def __str__(self) -> str:
        return f"{self.name}:{self.value}"

    def matches(self, name: str, value: str) -> bool:
        """Return True when name and value match ignoring case."""
        return (
            self.name.casefold() == name.casefold()
            and self.value.casefold() == value.casefold()
        )


def parse_tag(text: str) -> Tag | None:
    """Parse ``name:value`` text, returning None when either side is blank."""
    name, sep, value = text.partition(":")
    name = name.strip()
    value = value.strip()
    if not sep or not name or not value:
        return None
    return Tag(name=name, value=value)
