"""
Config system - Layered router configuration with validation.

Only the ``router`` section is read. Sources are merged with precedence
(later overrides earlier):
config files (YAML/JSON) < .env file < environment variables < overrides.
"""

from typing import Any, Dict, List, Mapping, Optional
from dataclasses import dataclass, field
from glob import glob
from pathlib import Path
import json
import logging
import os

import yaml
from dotenv import dotenv_values

logger = logging.getLogger("trailhead.config")

SECTION = "router"


@dataclass
class RouterConfig:
    """
    Router-wide settings.

    Attributes:
        global_query_params: Optional query parameter names extracted from
            every URL, independently of the matched pattern.
    """
    global_query_params: List[str] = field(default_factory=list)


class ConfigError(Exception):
    """Raised when configuration validation fails."""
    pass


class ConfigLoader:
    """
    Loads the ``router`` section from multiple sources with precedence:
    overrides > environment variables > .env file > config files > defaults

    Environment keys look like ``TRAILHEAD_ROUTER__GLOBAL_QUERY_PARAMS``.
    """

    def __init__(self, env_prefix: str = "TRAILHEAD_"):
        self.env_prefix = env_prefix
        self.router_data: Dict[str, Any] = {}

    @classmethod
    def load(
        cls,
        paths: Optional[List[str]] = None,
        env_prefix: str = "TRAILHEAD_",
        env_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> "ConfigLoader":
        """
        Load configuration from multiple sources.

        Args:
            paths: Config file paths (glob patterns supported)
            env_prefix: Prefix for environment variables
            env_file: Path to .env file
            overrides: Manual overrides shaped like a config file (highest precedence)

        Returns:
            Configured ConfigLoader instance
        """
        loader = cls(env_prefix=env_prefix)

        for pattern in paths or []:
            loader._load_from_files(pattern)

        if env_file:
            loader._load_env_file(env_file)

        loader._load_env(os.environ)

        if overrides:
            loader._merge_section(overrides, "overrides")

        return loader

    def _load_from_files(self, pattern: str):
        """Load config from JSON or YAML files."""
        matched = sorted(glob(pattern))
        if not matched:
            raise ConfigError(f"No config file matches '{pattern}'")

        for path_str in matched:
            path = Path(path_str)
            with open(path) as f:
                if path.suffix == ".json":
                    data = json.load(f)
                elif path.suffix in (".yaml", ".yml"):
                    data = yaml.safe_load(f)
                else:
                    raise ConfigError(f"Unsupported config file type: {path}")

            if data is not None:
                self._merge_section(data, path)
            logger.debug("Loaded config file %s", path)

    def _merge_section(self, data: Any, source: Any):
        if not isinstance(data, dict):
            raise ConfigError(f"Config from {source} must contain a mapping")

        section = data.get(SECTION)
        if section is None:
            return
        if not isinstance(section, dict):
            raise ConfigError(f"Section '{SECTION}' from {source} must be a mapping")
        self.router_data.update(section)

    def _load_env_file(self, path: str):
        """Load config from .env file."""
        env_path = Path(path)
        if not env_path.exists():
            return
        self._load_env(dotenv_values(env_path))

    def _load_env(self, environ: Mapping[str, Optional[str]]):
        """Pick ``<prefix>ROUTER__<FIELD>`` keys out of an environment."""
        section_prefix = f"{self.env_prefix}{SECTION.upper()}__"
        for key, value in environ.items():
            if value is None or not key.startswith(section_prefix):
                continue
            name = key[len(section_prefix):].lower()
            self.router_data[name] = self._parse_value(value)

    def _parse_value(self, value: str) -> Any:
        """Parse a JSON list, or keep the raw string."""
        if value.startswith("["):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                pass
        return value

    def router_config(self) -> RouterConfig:
        """Validate the ``router`` section into a RouterConfig."""
        names = self.router_data.get("global_query_params", [])

        # Lists may come from env vars as comma-separated strings
        if isinstance(names, str):
            names = [n.strip() for n in names.split(",") if n.strip()]

        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise ConfigError(
                f"Config field 'global_query_params' expected a list of strings, "
                f"got {names!r}"
            )

        return RouterConfig(global_query_params=list(names))
