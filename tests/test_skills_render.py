from __future__ import annotations
from pathlib import Path

from skillbridge.skills.models import Skill
from skillbridge.skills.render import render_skill_prompt

def make(body: str = "# Hello") -> Skill:
    return Skill(
        name="demo",
        directory=Path("/r/skills/demo"),
        identifier="skills_demo",
        description="A demo skill for testing purposes.",
        body=body,
        path=Path("/r/skills/demo/SKILL.md"),
    )

def test_without_resources_omits_resource_block() -> None:
    text = render_skill_prompt(make(), [])
    assert text == '<skill name="demo">\n\n# Hello\n\n</skill>'
    assert "<skill_resources>" not in text

def test_with_resources() -> None:
    text = render_skill_prompt(make(), ["/r/skills/demo/notes.txt", Path("/r/skills/demo/a/b.py")])
    assert text == (
        '<skill name="demo">\n\n# Hello\n\n</skill>\n\n'
        "<skill_resources>\n"
        "IMPORTANT: The skill demo may reference certain resource files. "
        "Use their full paths:\n\n"
        "/r/skills/demo/notes.txt\n"
        "/r/skills/demo/a/b.py\n"
        "</skill_resources>"
    )

def test_paths_are_not_deduplicated() -> None:
    text = render_skill_prompt(make(), ["/x", "/x"])
    assert text.endswith(":\n\n/x\n/x\n</skill_resources>")

def test_body_with_braces_is_left_alone() -> None:
    text = render_skill_prompt(make("Use {placeholder} and {{double}}"), iter([]))
    assert "Use {placeholder} and {{double}}" in text

def test_accepts_generators() -> None:
    paths = (p for p in ["/r/skills/demo/one.txt"])
    assert "/r/skills/demo/one.txt\n</skill_resources>" in render_skill_prompt(make(), paths)
