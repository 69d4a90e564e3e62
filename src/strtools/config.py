"""
Package configuration.

Defaults are read from the `config.yaml` file that ships with the package, and
are updated with any values found in the user config file, if one exists.
"""

# std
from copy import deepcopy
from pathlib import Path

# third-party
import yaml
from loguru import logger
from platformdirs import user_config_path


# ---------------------------------------------------------------------------- #
PACKAGE = 'strtools'
FILENAME = 'config.yaml'
SOURCE = Path(__file__).parent / FILENAME

CACHE = {}


# ---------------------------------------------------------------------------- #

def load_yaml(filename):
    with Path(filename).open('r') as file:
        return yaml.safe_load(file) or {}


def load_file(filename):
    filename = Path(filename)
    if filename not in CACHE:
        if not filename.exists():
            raise FileNotFoundError(f"Non-existent file: '{filename!s}'")

        CACHE[filename] = load_yaml(filename)

    return CACHE[filename]


def user_config_file(filename=FILENAME):
    return user_config_path(PACKAGE) / filename


def update(config, new):
    """Recursively merge the mapping `new` into `config`."""
    for key, val in new.items():
        if isinstance(val, dict) and isinstance(config.get(key), dict):
            update(config[key], val)
        else:
            config[key] = val
    return config


def load(filename=None, defaults=SOURCE):
    """
    Load the package configuration.

    Parameters
    ----------
    filename : str or Path, optional
        User configuration file. The default, None, uses `config.yaml` in the
        platform specific user config folder for the package. Missing user
        files are ignored.
    defaults : str or Path
        The file containing the default values, by default the `config.yaml`
        file shipped with the package.

    Returns
    -------
    ConfigNode
    """
    config = deepcopy(load_file(defaults))

    path = Path(filename) if filename else user_config_file()
    if path.exists():
        logger.info("Found user config file for package {!r} at '{!s}'.",
                    PACKAGE, path)
        update(config, load_yaml(path))

    return ConfigNode(config)


# ---------------------------------------------------------------------------- #

class ConfigNode(dict):
    """
    Read-only attribute access for (nested) configuration dictionaries.
    """

    def __init__(self, mapping=(), **kws):
        super().__init__(mapping, **kws)
        for key, val in self.items():
            if isinstance(val, dict) and not isinstance(val, ConfigNode):
                super().__setitem__(key, type(self)(val))

    def __getattr__(self, key):
        """
        Try to get the value in the dict associated with key `key`. If `key`
        is not a key in the dict, try get the attribute from the parent class.
        """
        return self[key] if key in self else super().__getattribute__(key)

    def __setattr__(self, key, value):
        raise AttributeError(f'{type(self).__name__} is read-only.')


# ---------------------------------------------------------------------------- #
CONFIG = load()
