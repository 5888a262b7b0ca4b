"""Running container models."""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from ..core.constants import SHORT_ID_LENGTH


class ContainerInfo(BaseModel):
    """Snapshot of a running container as reported by the Docker list API."""

    model_config = ConfigDict(frozen=True)

    id: str
    names: List[str] = Field(default_factory=list)
    image: str = ""

    @property
    def name(self) -> str:
        """Canonical display name: first alias without its leading slash."""
        if not self.names:
            return self.id[:SHORT_ID_LENGTH]
        name = self.names[0]
        return name[1:] if name.startswith("/") else name

    @property
    def label(self) -> str:
        return f"{self.name} ({self.image})"

    def matches(self, container_filter: str) -> bool:
        """Case-insensitive substring match on name or image."""
        needle = container_filter.lower()
        return needle in self.name.lower() or needle in self.image.lower()

    @classmethod
    def from_attrs(cls, attrs: Dict[str, Any]) -> 'ContainerInfo':
        """Create from a container list API entry."""
        return cls(
            id=attrs.get("Id", ""),
            names=attrs.get("Names") or [],
            image=attrs.get("Image", ""),
        )
