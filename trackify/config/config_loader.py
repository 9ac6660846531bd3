import copy
import json
import os
from typing import Dict, Mapping, Optional

DEFAULT_CONFIG_FILE = "config/trackify_config.json"

# variable -> (section, key, type)
ENV_OVERRIDES = {
    "MONGODB_URI": ("mongodb", "connection_string", str),
    "MONGODB_DATABASE": ("mongodb", "database_name", str),
    "MONGODB_COLLECTION": ("mongodb", "sightings_collection", str),
    "HOST": ("server", "host", str),
    "PORT": ("server", "port", int),
    "TRACKIFY_API_URL": ("client", "api_url", str),
    "LOG_LEVEL": ("logging", "level", str),
}


class ConfigLoader:
    @staticmethod
    def default_config() -> Dict:
        return copy.deepcopy({
            "mongodb": {
                "connection_string": "mongodb://localhost:27017/",
                "database_name": "license_plate_database",
                "sightings_collection": "license_plate_collection",
                "server_selection_timeout_ms": 5000
            },
            "server": {
                "host": "0.0.0.0",
                "port": 3000,
                "cors_origins": ["*"]
            },
            "client": {
                "api_url": "http://localhost:3000",
                "timeout": 10.0
            },
            "logging": {
                "level": "INFO",
                "log_dir": "logs",
                "log_file": "trackify.log"
            }
        })

    @staticmethod
    def load_config(config_file: str = DEFAULT_CONFIG_FILE,
                    environ: Optional[Mapping[str, str]] = None) -> Dict:
        default_config = ConfigLoader.default_config()

        try:
            with open(config_file, 'r') as f:
                config = json.load(f)
        except FileNotFoundError:
            config_dir = os.path.dirname(config_file)
            if config_dir:
                os.makedirs(config_dir, exist_ok=True)
            with open(config_file, 'w') as f:
                json.dump(default_config, f, indent=4)
            config = ConfigLoader.default_config()
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid config file {config_file}: {e}") from e

        if not isinstance(config, dict):
            raise ValueError(f"Invalid config file {config_file}: expected a JSON object")

        for key, value in default_config.items():
            if key not in config:
                config[key] = value
            elif isinstance(value, dict) and isinstance(config[key], dict):
                for sub_key, sub_value in value.items():
                    config[key].setdefault(sub_key, sub_value)

        ConfigLoader.apply_env_overrides(config, os.environ if environ is None else environ)
        return config

    @staticmethod
    def apply_env_overrides(config: Dict, environ: Mapping[str, str]) -> Dict:
        for variable, (section, key, cast) in ENV_OVERRIDES.items():
            raw = environ.get(variable)
            if raw is None or raw == "":
                continue
            try:
                config[section][key] = cast(raw)
            except ValueError as e:
                raise ValueError(f"Invalid value for {variable}: {raw!r}") from e
        return config
