"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Dataclass settings read from ``<_prefix>_<FIELD>`` environment variables.

    Subclasses set ``_prefix`` and may override :meth:`_validate`, which
    runs after construction.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        pass

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """``MongoEventStoreSettings.env_key("uri")`` -> ``"EVENT_STORE_URI"``."""
        return "_".join(part for part in (cls._prefix, field_name) if part).upper()


__all__ = ["Settings"]
