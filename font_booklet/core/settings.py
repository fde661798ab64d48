import json
from pathlib import Path

class Settings:
    def __init__(self, config_path="config/settings.json"):
        self.config_path = Path(config_path)
        self.config = self._load_config()

    def _load_config(self):
        if not self.config_path.exists():
            # Return default config if file missing
            return {
                "db_path": "data/defaults.db",
                "font_dirs": [],
                "sample_point_size": 24,
                "log_level": "INFO",
                "watch_font_dirs": True
            }

        with open(self.config_path, 'r') as f:
            return json.load(f)

    def save_config(self, new_config):
        """
        Update and save configuration to JSON file.
        """
        self.config.update(new_config)

        # Ensure directory exists
        if not self.config_path.parent.exists():
            self.config_path.parent.mkdir(parents=True)

        with open(self.config_path, 'w') as f:
            json.dump(self.config, f, indent=4)

    @property
    def db_path(self):
        return self.config.get("db_path", "data/defaults.db")

    @property
    def font_dirs(self):
        return self.config.get("font_dirs", [])

    @property
    def sample_point_size(self):
        return int(self.config.get("sample_point_size", 24))

    @property
    def log_level(self):
        return self.config.get("log_level", "INFO")

    @property
    def watch_font_dirs(self):
        return bool(self.config.get("watch_font_dirs", True))
