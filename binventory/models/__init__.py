"""binventory data models: Pydantic v2, frozen (immutable)."""

from binventory.models.artifacts import Artifact
from binventory.models.platform import Arch, Os

__all__ = ["Artifact", "Arch", "Os"]
