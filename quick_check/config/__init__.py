from .settings import Settings, config_file_paths, get_settings, load_project_config

__all__ = ["Settings", "config_file_paths", "get_settings", "load_project_config"]
