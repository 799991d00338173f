"""Configuration management."""

import json
import os
from pathlib import Path
from typing import Optional


def get_boxmenu_dir() -> Path:
    """Get the boxmenu data directory (XDG-compliant)."""
    if env_dir := os.environ.get("BOXMENU_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "boxmenu"


class Config:
    """Application configuration."""

    # Toggleable settings with descriptions (attr_name -> description)
    TOGGLES: dict[str, str] = {
        "debug": "Log to ~/.config/boxmenu/debug.log",
        "clear_screen": "Clear the terminal before each redraw",
    }

    def __init__(self, boxmenu_dir: Optional[Path] = None):
        """Load config from directory."""
        self.boxmenu_dir = boxmenu_dir or get_boxmenu_dir()
        self._config_file = self.boxmenu_dir / "config.json"
        self._load()

    def _load(self):
        """Load config from file."""
        from boxmenu.utils.constants import DEFAULT_FALLBACK_WIDTH

        # Set defaults
        self.debug = False
        self.clear_screen = True
        # Width used when the console is not a terminal
        self.fallback_width = DEFAULT_FALLBACK_WIDTH
        self.env: dict[str, str] = {}

        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
                self.debug = data.get("debug", False)
                self.clear_screen = data.get("clear_screen", True)
                try:
                    self.fallback_width = int(
                        data.get("fallback_width", DEFAULT_FALLBACK_WIDTH)
                    )
                except (TypeError, ValueError):
                    self.fallback_width = DEFAULT_FALLBACK_WIDTH
                self.env = data.get("env", {})
            except (json.JSONDecodeError, IOError):
                pass

        # Apply env section from config, then shell env vars override
        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply env overrides: first from config.env, then from shell BOXMENU_* vars."""
        prefix = "BOXMENU_"

        def apply_env_dict(env_dict: dict[str, str]):
            for key, value in env_dict.items():
                # Support both BOXMENU_FOO and FOO formats in config.env
                if key.startswith(prefix):
                    attr_name = key[len(prefix) :].lower()
                else:
                    attr_name = key.lower()
                # BOXMENU_DIR locates the config, it is not a setting
                if attr_name in ("dir", "env") or not hasattr(self, attr_name):
                    continue
                current = getattr(self, attr_name)
                if isinstance(current, bool):
                    setattr(self, attr_name, value.lower() in ("true", "1", "yes"))
                elif isinstance(current, int):
                    try:
                        setattr(self, attr_name, int(value))
                    except ValueError:
                        pass
                else:
                    setattr(self, attr_name, value)

        apply_env_dict(self.env)

        shell_env = {k: v for k, v in os.environ.items() if k.startswith(prefix)}
        apply_env_dict(shell_env)

    def save(self):
        """Save config to file."""
        self.boxmenu_dir.mkdir(parents=True, exist_ok=True)
        data = {
            "debug": self.debug,
            "clear_screen": self.clear_screen,
            "fallback_width": self.fallback_width,
            "env": self.env,
        }
        self._config_file.write_text(json.dumps(data, indent=2))

    def set_toggle(self, attr: str, enabled: bool):
        """Set a toggle value and persist it."""
        if attr not in self.TOGGLES:
            return
        setattr(self, attr, enabled)
        self.save()

    def set_debug(self, enabled: bool):
        """Enable or disable debug mode."""
        self.set_toggle("debug", enabled)

