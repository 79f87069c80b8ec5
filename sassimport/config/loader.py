# sassimport/config/loader.py
"""
Handles loading configuration from TOML files and turning it into
ImporterSettings.
"""
import toml
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import fields as dataclass_fields
import structlog

from sassimport.exceptions import ConfigError

from .settings import ImporterSettings

log = structlog.get_logger(__name__)

PROJECT_CONFIG_FILENAMES = [".sassimport.toml", "sassimport.toml", "pyproject.toml"]

CONFIG_KEY_TO_SETTINGS_ATTR_MAP: Dict[str, str] = {
    "roots": "roots",
    "load_paths": "roots",
    "root_path": "root_path",
    "extensions": "extensions",
    "partial_prefixes": "partial_prefixes",
    "indented_marker": "indented_marker",
    "exclude_patterns": "exclude_patterns",
    "template_vars": "template_vars",
}

def _load_toml_file_data(file_path: Path) -> Dict[str, Any]:
    if not file_path.is_file():
        return {}
    log.debug("loading_toml_config_file", path=str(file_path))
    try:
        data = toml.load(file_path)
    except (toml.TomlDecodeError, OSError) as e:
        raise ConfigError(f"could not read config file {file_path}: {e}") from e
    if file_path.name == "pyproject.toml":
        return data.get("tool", {}).get("sassimport", {})
    return data

def load_config_data(start_dir: Optional[Path] = None, config_file: Optional[Path] = None) -> Dict[str, Any]:
    # returns raw settings from an explicit file or the first project config found.
    if config_file is not None:
        if not config_file.is_file():
            raise ConfigError(f"config file not found: {config_file}")
        data = _load_toml_file_data(config_file)
        data.setdefault("root_path", str(config_file.resolve().parent))
        return data

    base = (start_dir or Path.cwd()).resolve()
    for filename in PROJECT_CONFIG_FILENAMES:
        candidate = base / filename
        if candidate.is_file():
            data = _load_toml_file_data(candidate)
            if data:
                log.info("loading_project_config", path=str(candidate))
                data.setdefault("root_path", str(base))
                return data
    log.debug("no_configuration_files_loaded", searched=str(base))
    return {}

def build_settings(raw: Dict[str, Any], **overrides: Any) -> ImporterSettings:
    # maps config keys onto ImporterSettings, applying non-empty overrides last.
    kwargs: Dict[str, Any] = {}
    for key, value in raw.items():
        attr = CONFIG_KEY_TO_SETTINGS_ATTR_MAP.get(key)
        if attr is None:
            log.warning("unknown_config_key_ignored", key=key)
            continue
        kwargs[attr] = value

    for attr, value in overrides.items():
        if value is None or value == () or value == []:
            continue
        kwargs[attr] = value

    valid = {f.name for f in dataclass_fields(ImporterSettings) if f.init}
    unknown = set(kwargs) - valid
    if unknown:
        raise ConfigError(f"unknown settings: {sorted(unknown)}")

    if "roots" in kwargs and not isinstance(kwargs["roots"], (list, tuple)):
        raise ConfigError(f"'roots' must be a list of directories, got {type(kwargs['roots']).__name__}")
    if "template_vars" in kwargs and not isinstance(kwargs["template_vars"], dict):
        raise ConfigError("'template_vars' must be a table")

    if isinstance(kwargs.get("root_path"), str):
        kwargs["root_path"] = Path(kwargs["root_path"])
    if "roots" in kwargs:
        kwargs["roots"] = [Path(r) for r in kwargs["roots"]]

    settings = ImporterSettings(**kwargs)
    log.debug("settings_built", roots=[str(r) for r in settings.roots], root_path=str(settings.root_path))
    return settings
