# schemas/base/profile.py
from __future__ import annotations

from typing import Any, ClassVar

from .model import EMISModel


class ProfileMixin:
    """
    Shared behaviour for comprehensive profiles.

    A profile is a core entity plus a set of optional extensions. On the wire
    the two are flattened into one object. ``core_model`` names the entity
    whose fields are mandatory. Every other field is an optional extension,
    validated by its own schema only when present.
    """

    core_model: ClassVar[type[EMISModel]]

    @classmethod
    def extension_names(cls) -> tuple[str, ...]:
        core_fields = cls.core_model.model_fields
        return tuple(name for name in cls.model_fields if name not in core_fields)  # type: ignore[attr-defined]

    def core(self) -> EMISModel:
        """The bare entity without any extension data."""
        core_cls = type(self).core_model
        data = self.model_dump(by_alias=True, exclude_none=True, include=set(core_cls.model_fields))  # type: ignore[attr-defined]
        return core_cls.model_validate(data)

    def extensions(self) -> dict[str, Any]:
        """Extensions present on this profile, keyed by attribute name."""
        return {
            name: getattr(self, name)
            for name in self.extension_names()
            if getattr(self, name) is not None
        }
