from __future__ import annotations
from pathlib import Path
from typing import Callable, Optional
import pytest

from skillbridge.skills.config import SKILLS_FILENAME

def skill_markdown(
    name: str,
    description: str,
    body: str = "# Body",
    extra: str = "",
) -> str:
    return f"---\nname: {name}\ndescription: \"{description}\"\n{extra}---\n\n{body}\n"

@pytest.fixture
def make_skill() -> Callable[..., Path]:
    def _make(
        root: Path,
        rel_dir: str,
        name: Optional[str] = None,
        description: str = "A demo skill for testing purposes.",
        body: str = "# Body",
        extra: str = "",
    ) -> Path:
        skill_dir = root / rel_dir
        skill_dir.mkdir(parents=True, exist_ok=True)
        path = skill_dir / SKILLS_FILENAME
        path.write_text(
            skill_markdown(name or skill_dir.name, description, body, extra),
            encoding="utf-8",
        )
        return path

    return _make

@pytest.fixture
def root(tmp_path: Path) -> Path:
    skills_root = tmp_path.resolve() / "skills"
    skills_root.mkdir()
    return skills_root
