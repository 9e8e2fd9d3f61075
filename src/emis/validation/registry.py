# src/emis/validation/registry.py
"""
Name -> schema lookup.

Every ``EMISModel`` subclass defined under ``emis.schemas`` is registered by
its class name, e.g. ``"ComprehensiveStaffProfile"``. The registry is built
once, on first use, by importing every schema module.
"""
from __future__ import annotations

import importlib
import inspect
import pkgutil
from typing import Dict, List, Type

from emis.app_logger import get_logger
from emis.exceptions import SchemaNotFoundError
from emis.schemas.base import EMISModel

log = get_logger("registry")

SCHEMA_PACKAGE = "emis.schemas"

SCHEMA_REGISTRY: Dict[str, Type[EMISModel]] = {}


def _import_all_schemas(package_name: str = SCHEMA_PACKAGE) -> Dict[str, Type[EMISModel]]:
    found: Dict[str, Type[EMISModel]] = {}
    pkg = importlib.import_module(package_name)
    for m in pkgutil.walk_packages(pkg.__path__, pkg.__name__ + "."):
        module = importlib.import_module(m.name)
        for name, obj in inspect.getmembers(module, inspect.isclass):
            # only classes defined in this module, not re-exports
            if obj.__module__ != module.__name__:
                continue
            if not issubclass(obj, EMISModel) or obj is EMISModel:
                continue
            if name in found and found[name] is not obj:
                raise RuntimeError(
                    f"Duplicate schema name {name!r}: {found[name].__module__} and {obj.__module__}"
                )
            found[name] = obj
    log.debug("Registered %d schemas from %s", len(found), package_name)
    return found


def _ensure_loaded() -> Dict[str, Type[EMISModel]]:
    if not SCHEMA_REGISTRY:
        SCHEMA_REGISTRY.update(_import_all_schemas())
    return SCHEMA_REGISTRY


def get_schema(name: str) -> Type[EMISModel]:
    """Return the schema registered under ``name`` or raise ``SchemaNotFoundError``."""
    registry = _ensure_loaded()
    try:
        return registry[name]
    except KeyError:
        raise SchemaNotFoundError(name, available=sorted(registry)) from None


def list_schemas() -> List[str]:
    return sorted(_ensure_loaded())


__all__ = ["SCHEMA_REGISTRY", "get_schema", "list_schemas"]
