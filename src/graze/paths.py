from pathlib import Path

from platformdirs import user_config_path

DEFAULT_CONFIG_FILENAME = "config.toml"


def user_config_file(
    app_name: str,
    filename: str = DEFAULT_CONFIG_FILENAME,
    *,
    roaming: bool = False,
) -> Path:
    """Return the per-user location of an application's config file.

    Nothing is created on disk; pass the result to one of the loaders.

    Args:
        app_name: Application name used for the config directory.
        filename: Name of the config file inside that directory.
        roaming: Use the roaming profile directory on Windows.

    Returns:
        Path: e.g. ``~/.config/<app_name>/config.toml`` on Linux.
    """
    return user_config_path(app_name, appauthor=False, roaming=roaming) / filename
