from .config import PrimaryRolePolicy, Settings, get_settings, settings

__all__ = ["settings", "Settings", "get_settings", "PrimaryRolePolicy"]
