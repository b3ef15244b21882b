# pingreport/configuration.py

"""
Configuration loader for pingreport.

Handles loading settings from config.yaml. If the file doesn't exist,
it creates one with default values.
"""

import sys
import yaml
from typing import Dict, Any, Optional

# Default structure and values, also used to generate the initial config.yaml.
DEFAULT_CONFIG = {
    'input_column': 'short_description',
    'host_prefix': 'ESXi host',
    'input_pattern': '*.csv',
    'ping_count': 4,
    'summary_log_name': 'ping_results.txt',
    'detail_log_name': 'ping_details.txt',
    'log_level': 'WARNING',
    'pause_on_exit': True,
}

_HEADER = (
    "# pingreport Configuration File\n"
    "# You can edit these settings. They are used on the next run.\n\n"
)


def get_config_path() -> str:
    """Returns the path to the config file."""
    return "config.yaml"


def load_or_create_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Loads configuration from config.yaml.

    If the file doesn't exist, it creates it with default values.
    If the file is invalid, it reports the error and exits.
    """
    config_path = config_path or get_config_path()
    try:
        with open(config_path, 'r') as f:
            user_config = yaml.safe_load(f)

        # Merge user config with defaults to ensure all keys are present
        config = DEFAULT_CONFIG.copy()
        if isinstance(user_config, dict):
            config.update(user_config)
        _validate(config, config_path)
        return config

    except FileNotFoundError:
        print(f"Configuration file not found. Creating '{config_path}' with default settings.")
        try:
            with open(config_path, 'w') as f:
                f.write(_HEADER)
                yaml.dump(DEFAULT_CONFIG, f, sort_keys=False, default_flow_style=False, indent=2)
            return DEFAULT_CONFIG.copy()
        except IOError as e:
            print(f"FATAL: Could not write default config file to '{config_path}': {e}", file=sys.stderr)
            sys.exit(1)

    except yaml.YAMLError as e:
        print(f"FATAL: Error parsing '{config_path}': {e}", file=sys.stderr)
        sys.exit(1)


def _validate(config: Dict[str, Any], config_path: str) -> None:
    """Exits on settings the pipeline cannot run with."""
    count = config.get('ping_count')
    if not isinstance(count, int) or isinstance(count, bool) or count < 1:
        print(f"FATAL: 'ping_count' in '{config_path}' must be a positive integer, got {count!r}.", file=sys.stderr)
        sys.exit(1)
    for key in ('input_column', 'host_prefix', 'input_pattern', 'summary_log_name', 'detail_log_name'):
        value = config.get(key)
        if not isinstance(value, str) or not value:
            print(f"FATAL: '{key}' in '{config_path}' must be a non-empty string.", file=sys.stderr)
            sys.exit(1)
