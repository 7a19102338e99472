"""File in charge of managing config options for the simplifier."""
import json
import logging
from copy import deepcopy
from os.path import dirname, isfile, join
from typing import Dict, Iterator, List, Optional, Tuple, Union


class Options:
    """Class in charge of parsing the options for the simplifier."""

    base = dirname(__file__)
    DEFAULT_CONFIG = join(base, "default.json")
    USER_CONFIG = join(base, "../../", "config.json")

    def __init__(self, settings_key_values: Optional[Dict[str, Union[str, int, bool, list]]] = None) -> None:
        logging.debug("initialize Options")
        self._settings_key_values = settings_key_values if settings_key_values is not None else {}

    def __str__(self) -> str:
        return json.dumps(self._settings_key_values, indent=4)

    def _load_user_config(self):
        """Load additional user settings and override defaults"""
        if isfile(self.USER_CONFIG):
            logging.debug(f"user config found at {self.USER_CONFIG}")
            with open(self.USER_CONFIG, "r") as f:
                try:
                    self._settings_key_values.update(json.load(f))
                except json.JSONDecodeError:
                    logging.warning(f"could not load user config at {self.USER_CONFIG}")

    def set(self, key: str, value):
        """Set key to value"""
        self._settings_key_values[key] = value

    def getstring(self, key: str, fallback: Optional[str] = None) -> str:
        """
        Return string value for key. Convert value to string.
        :param key - str: setting key ("section.setting")
        :param fallback - str: if given, return fallback on KeyError
        """
        if (value := self._settings_key_values.get(key, fallback)) is not None:
            return value if isinstance(value, str) else str(value).lower()
        raise KeyError(f"Invalid setting for {key}")

    def getboolean(self, key: str, fallback: Optional[bool] = None) -> bool:
        """
        Return boolean value for key.
        :param key - str: setting key ("section.setting")
        :param fallback - bool: if given, return fallback on KeyError
        """
        if (value := self._settings_key_values.get(key, fallback)) is not None:
            if isinstance(value, bool):
                return value
        raise KeyError(f"Invalid setting for {key}")

    def getlist(self, key: str, fallback: Optional[List[str]] = None) -> List[str]:
        """
        Return List[str] value for key.
        :param key - str: setting key ("section.setting")
        :param fallback - List[str]: if given, return fallback on KeyError
        """
        if (value := self._settings_key_values.get(key, fallback)) is not None:
            if isinstance(value, list):
                return value
        raise KeyError(f"Invalid setting for {key}")

    def getint(self, key: str, fallback: Optional[int] = None) -> int:
        """
        Return integer value for key.
        :param key - str: setting key ("section.setting")
        :param fallback - int: if given, return fallback on KeyError
        """
        if (value := self._settings_key_values.get(key, fallback)) is not None:
            if isinstance(value, int) and not isinstance(value, bool):
                return value
        raise KeyError(f"Invalid setting for {key}")

    @classmethod
    def load_default_options(cls):
        """Parse default options for the simplifier."""
        defaults = cls._read_json_file(cls.DEFAULT_CONFIG)
        settings_key_values = {key: value for key, value in cls._get_key_value_pairs_from_defaults(defaults)}
        return cls(settings_key_values=settings_key_values)

    @classmethod
    def from_user_config(cls):
        """
        Create Options from the defaults, overridden by the user config (config.json in the project root).
        """
        options = cls.load_default_options()
        options._load_user_config()
        return options

    @classmethod
    def from_dict(cls, options_dict: Dict[str, Union[bool, str, int, list]]):
        """Create Options from dict only"""
        return cls(settings_key_values=deepcopy(options_dict))

    @staticmethod
    def _read_json_file(filepath: str):
        """Return parsed JSON file"""
        with open(filepath, "r") as f:
            return json.load(f)

    @staticmethod
    def _get_key_value_pairs_from_defaults(defaults: List[Dict]) -> Iterator[Tuple[str, Union[str, int, list, bool]]]:
        """Extract key value pairs from defaults"""
        for option_group in defaults:
            for option in option_group["options"]:
                yield option["dest"], option["default"]
