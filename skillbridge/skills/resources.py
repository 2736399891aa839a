"""Files shipped alongside a skill's SKILL.md."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

from .models import Skill

def iter_skill_resources(skill: Skill) -> Iterator[Path]:
    """Yield absolute paths of every file under the skill directory.

    The walk happens lazily and from scratch on each call, so files added or
    removed between invocations are picked up. Any file named like the
    skill's metadata file is skipped, however deeply nested. Hidden entries
    are skipped and symlinked directories are not followed.
    """
    excluded = skill.path.name
    for dirpath, dirnames, filenames in os.walk(skill.directory):
        dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
        for filename in sorted(filenames):
            if filename == excluded or filename.startswith("."):
                continue
            yield Path(dirpath, filename).absolute()
