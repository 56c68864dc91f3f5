# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump

try:
    from yaml import CSafeDumper as SafeDumper
except ImportError:
    from yaml import SafeDumper  # type: ignore[assignment]

from keepsake import configuration


class ConfigurationRepository:
    """
    The YAML settings file. It is read on first use, and changes stay in
    memory until flush() writes them back.
    """

    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self._unsaved = False

    def __load_data(self) -> configuration.Configuration:
        if self._config is None:
            config = configuration.get_default_configuration()
            stored = configuration.read_configuration_file()
            # Files written by older versions keep defaults for newer settings
            for key in config.keys() & stored.keys():
                config[key] = stored[key]  # type: ignore[literal-required]
            self._config = config
        return self._config

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(
            dump(dict(config), Dumper=SafeDumper, sort_keys=False)
        )

    def flush(self) -> bool:
        """Write pending changes. Returns False when there were none."""
        if self._config is None or not self._unsaved:
            return False
        self.__save_data(self._config)
        self._unsaved = False
        return True

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.__load_data())

    def update_config(
        self,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        share_origin: Optional[str] = None,
        storage_quota_bytes: Optional[int] = None,
        remove_storage_quota: bool = False,
        connectivity_host: Optional[str] = None,
        connectivity_port: Optional[int] = None,
        log_level: Optional[str] = None,
    ) -> None:
        config = self.__load_data()
        self._unsaved = True

        changes = {
            "data_path": data_path,
            "share_origin": share_origin,
            "storage_quota_bytes": storage_quota_bytes,
            "connectivity_host": connectivity_host,
            "connectivity_port": connectivity_port,
            "log_level": log_level.upper() if log_level is not None else None,
        }
        for key, value in changes.items():
            if value is not None:
                config[key] = value  # type: ignore[literal-required]

        if remove_data_path:
            config["data_path"] = None
        if remove_storage_quota:
            config["storage_quota_bytes"] = None


CONFIGURATION_REPO = ConfigurationRepository()
