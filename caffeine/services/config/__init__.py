from .editor_settings import EditorSettings, build_config
from .ini_config_service import IniConfigService

__all__ = ["EditorSettings", "IniConfigService", "build_config"]
