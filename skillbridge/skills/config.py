"""Where skills are looked up."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

SKILLS_FILENAME = "SKILL.md"
SKILLS_DIR_NAME = "skills"
PROJECT_CONFIG_DIR_NAME = ".opencode"
APP_NAME = "opencode"

def _default_xdg_config_home(home: Path, environ: Mapping[str, str]) -> Path:
    value = environ.get("XDG_CONFIG_HOME")
    if value:
        return Path(value).expanduser()
    return home / ".config"

@dataclass
class SkillsConfig:
    directory: Path
    home: Path = field(default_factory=Path.home)
    xdg_config_home: Optional[Path] = None
    project_dir_name: str = PROJECT_CONFIG_DIR_NAME
    app_name: str = APP_NAME
    skills_dir_name: str = SKILLS_DIR_NAME
    skills_filename: str = SKILLS_FILENAME
    # None or 1 walks the roots one after another
    max_workers: Optional[int] = None

    def __post_init__(self) -> None:
        self.directory = Path(self.directory)
        self.home = Path(self.home)
        if self.xdg_config_home is None:
            self.xdg_config_home = _default_xdg_config_home(self.home, os.environ)
        else:
            self.xdg_config_home = Path(self.xdg_config_home)

    @classmethod
    def from_env(
        cls,
        directory: str | os.PathLike[str],
        environ: Optional[Mapping[str, str]] = None,
        **overrides,
    ) -> "SkillsConfig":
        environ = os.environ if environ is None else environ
        home_value = environ.get("HOME")
        home = Path(home_value) if home_value else Path.home()
        return cls(
            directory=Path(directory),
            home=home,
            xdg_config_home=_default_xdg_config_home(home, environ),
            **overrides,
        )

    def project_skills_dir(self) -> Path:
        return self.directory / self.project_dir_name / self.skills_dir_name

    def user_skills_dir(self) -> Path:
        return self.home / self.project_dir_name / self.skills_dir_name

    def config_skills_dir(self) -> Path:
        return Path(self.xdg_config_home) / self.app_name / self.skills_dir_name
