from __future__ import annotations
from pathlib import Path
import logging
import pytest

from skillbridge.plugin import SkillsManager, setup_skills
from skillbridge.skills.config import SkillsConfig
from skillbridge.skills.errors import DuplicateIdentifierWarning
from skillbridge.tools.skill_tool import SkillTool
from skillbridge.tools.tool_registry import ToolRegistry

@pytest.fixture
def config(tmp_path: Path) -> SkillsConfig:
    base = tmp_path.resolve()
    return SkillsConfig(
        directory=base / "project",
        home=base / "home",
        xdg_config_home=base / "xdg",
    )

def test_registers_each_skill_with_host(config: SkillsConfig, make_skill) -> None:
    project_root = config.project_skills_dir()
    make_skill(project_root, "demo", body="# Hello")
    (project_root / "demo" / "notes.txt").write_text("notes", encoding="utf-8")
    make_skill(config.config_skills_dir(), "tools/lint", description="Lint the codebase before commit.")

    calls = []
    registry = ToolRegistry()

    def register(name, description, handler):
        calls.append((name, description))
        registry.register_callable(name, description, handler)

    tools = setup_skills(config.directory, register=register, config=config)

    assert calls == [
        ("skills_demo", "A demo skill for testing purposes."),
        ("skills_tools_lint", "Lint the codebase before commit."),
    ]
    assert sorted(tools) == ["skills_demo", "skills_tools_lint"]
    assert registry.invoke("skills_demo") == (
        '<skill name="demo">\n\n# Hello\n\n</skill>\n\n'
        "<skill_resources>\n"
        "IMPORTANT: The skill demo may reference certain resource files. "
        "Use their full paths:\n\n"
        f"{project_root / 'demo' / 'notes.txt'}\n"
        "</skill_resources>"
    )
    assert "<skill_resources>" not in tools["skills_tools_lint"]()

def test_without_register_returns_mapping(config: SkillsConfig, make_skill) -> None:
    make_skill(config.user_skills_dir(), "demo")
    tools = setup_skills(config.directory, config=config)
    assert list(tools) == ["skills_demo"]
    assert isinstance(tools["skills_demo"], SkillTool)

def test_no_skills_anywhere(config: SkillsConfig) -> None:
    assert setup_skills(config.directory, config=config) == {}

def test_setup_from_environment(tmp_path: Path, monkeypatch, make_skill) -> None:
    base = tmp_path.resolve()
    monkeypatch.setenv("HOME", str(base / "home"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(base / "xdg"))
    make_skill(base / "xdg" / "opencode" / "skills", "from-xdg")
    tools = setup_skills(base / "project")
    assert list(tools) == ["skills_from_xdg"]

def test_duplicate_identifier_last_registration_wins(config: SkillsConfig, make_skill) -> None:
    make_skill(config.project_skills_dir(), "dupe", description="Project copy of the dupe skill.")
    make_skill(config.user_skills_dir(), "dupe", description="User copy of the dupe skill, later.")

    registry = ToolRegistry()
    with pytest.warns(DuplicateIdentifierWarning):
        tools = setup_skills(config.directory, register=registry.register_callable, config=config)

    assert registry.get_tool_names() == ["skills_dupe"]
    assert registry.get_description("skills_dupe") == "User copy of the dupe skill, later."
    assert tools["skills_dupe"].skill.directory == config.user_skills_dir() / "dupe"

def test_manager_discovers_once(config: SkillsConfig, make_skill) -> None:
    make_skill(config.project_skills_dir(), "first")
    manager = SkillsManager(config)
    make_skill(config.project_skills_dir(), "second")
    assert [skill.name for skill in manager.skills] == ["first"]
    assert list(manager.tools()) == ["skills_first"]

def test_summary_log_reflects_host_registration(config: SkillsConfig, make_skill, caplog) -> None:
    make_skill(config.project_skills_dir(), "demo")
    caplog.set_level(logging.INFO, logger="skillbridge.plugin")

    setup_skills(config.directory, config=config)
    messages = [record.getMessage() for record in caplog.records]
    assert "Prepared 1 skill tool(s) for the caller" in messages
    assert not any(message.startswith("Registered") for message in messages)

    caplog.clear()
    setup_skills(config.directory, register=ToolRegistry().register_callable, config=config)
    assert "Registered 1 skill tool(s)" in [record.getMessage() for record in caplog.records]
