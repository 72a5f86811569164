"""Settings management."""

from schema_forms.config.settings import FormSettings, load_settings

__all__ = ["FormSettings", "load_settings"]
