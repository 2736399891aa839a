from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Optional
import logging
import os
import warnings
import yaml
from .config import SKILLS_FILENAME, SkillsConfig
from .errors import (
    DuplicateIdentifierWarning,
    FormatError,
    NamingConflictError,
    SchemaError,
    SkillIOError,
    SkillParseError,
)
from .models import Skill, SkillError, SkillLoadOutcome, SkillRoot, SkillScope
from .naming import generate_tool_name
from .schema import validate_frontmatter

logger = logging.getLogger(__name__)

def load_skills(config: SkillsConfig) -> SkillLoadOutcome:
    return load_skills_from_roots(
        skill_roots_for_config(config),
        skills_filename=config.skills_filename,
        max_workers=config.max_workers,
    )

def skill_roots_for_config(config: SkillsConfig) -> list[SkillRoot]:
    candidates = [
        SkillRoot(path=config.project_skills_dir(), scope=SkillScope.PROJECT),
        SkillRoot(path=config.user_skills_dir(), scope=SkillScope.USER),
        SkillRoot(path=config.config_skills_dir(), scope=SkillScope.CONFIG),
    ]
    # Running from $HOME makes the project and user roots the same directory.
    roots: list[SkillRoot] = []
    seen: set[Path] = set()
    for root in candidates:
        key = Path(os.path.abspath(root.path))
        if key in seen:
            continue
        seen.add(key)
        roots.append(root)
    return roots

def load_skills_from_roots(
    roots: Iterable[SkillRoot],
    skills_filename: str = SKILLS_FILENAME,
    max_workers: Optional[int] = None,
) -> SkillLoadOutcome:
    roots = list(roots)
    if max_workers and max_workers > 1 and len(roots) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            partials = list(
                pool.map(lambda root: discover_skills_under_root(root, skills_filename), roots)
            )
    else:
        partials = [discover_skills_under_root(root, skills_filename) for root in roots]

    outcome = SkillLoadOutcome()
    for partial in partials:
        outcome.extend(partial)

    outcome.duplicates = find_duplicate_tool_names(outcome.skills)
    if outcome.duplicates:
        logger.warning("Duplicate tool names detected: %s", ", ".join(outcome.duplicates))
        warnings.warn(
            f"Duplicate tool names detected: {', '.join(outcome.duplicates)}",
            DuplicateIdentifierWarning,
            stacklevel=2,
        )
    return outcome

def find_duplicate_tool_names(skills: Iterable[Skill]) -> list[str]:
    seen: set[str] = set()
    duplicates: set[str] = set()
    for skill in skills:
        if skill.identifier in seen:
            duplicates.add(skill.identifier)
        seen.add(skill.identifier)
    return sorted(duplicates)

def discover_skills_under_root(
    root: SkillRoot, skills_filename: str = SKILLS_FILENAME
) -> SkillLoadOutcome:
    outcome = SkillLoadOutcome()
    try:
        base = root.path.resolve()
    except OSError as err:
        logger.debug("Could not resolve skills directory %s: %s", root.path, err)
        return outcome

    if not base.is_dir():
        logger.debug("Skipping skills directory %s (%s): not a directory", base, root.scope.value)
        return outcome

    queue = [base]
    while queue:
        directory = queue.pop(0)
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as err:
            logger.debug("Could not scan skills directory %s: %s", directory, err)
            continue

        for entry in entries:
            name = entry.name
            if name.startswith("."):
                continue
            try:
                if entry.is_symlink():
                    continue
                if entry.is_dir():
                    queue.append(Path(entry.path))
                    continue
                if entry.is_file() and name == skills_filename:
                    skill = load_skill(Path(entry.path), base, outcome)
                    if skill is not None:
                        outcome.skills.append(skill)
            except OSError:
                continue

    return outcome

def load_skill(
    path: Path, root: Path, outcome: Optional[SkillLoadOutcome] = None
) -> Optional[Skill]:
    """Parse one SKILL.md, logging and recording the failure instead of raising."""
    try:
        return parse_skill_file(path, root)
    except SkillParseError as err:
        log_parse_error(path, err)
        if outcome is not None:
            outcome.errors.append(SkillError(path=path, kind=err.kind, message=str(err)))
        return None

def log_parse_error(path: Path, err: SkillParseError) -> None:
    if isinstance(err, SchemaError):
        logger.error("Invalid frontmatter in %s:", path)
        for message in err.messages:
            logger.error("   - %s", message)
    elif isinstance(err, NamingConflictError):
        logger.error(
            'Name mismatch in %s: frontmatter name "%s", directory name "%s". '
            "Fix: update the 'name' field in %s to match the directory name",
            path,
            err.declared_name,
            err.directory_name,
            path.name,
        )
    else:
        logger.error("Error parsing skill %s: %s", path, err)

def parse_skill_file(path: Path, root: Path) -> Skill:
    try:
        contents = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as err:
        raise SkillIOError(path, f"failed to read file: {err}") from err

    split = split_frontmatter(contents)
    if split is None:
        raise FormatError(path, "missing YAML frontmatter delimited by ---")
    frontmatter, body = split

    # PyYAML is YAML 1.1: unquoted yes/no/on/off load as booleans and then
    # fail the string-only schema.
    try:
        parsed = yaml.safe_load(frontmatter)
    except yaml.YAMLError as err:
        raise FormatError(path, f"invalid YAML: {err}") from err
    if parsed is None:
        parsed = {}
    if not isinstance(parsed, dict):
        raise FormatError(
            path, f"frontmatter must be a mapping, got {type(parsed).__name__}"
        )

    try:
        header = validate_frontmatter(parsed)
    except SchemaError as err:
        raise err.with_path(path) from err

    directory_name = path.parent.name
    if header.name != directory_name:
        raise NamingConflictError(path, header.name, directory_name)

    allowed_tools = header.allowed_tools
    return Skill(
        name=header.name,
        directory=path.parent,
        identifier=generate_tool_name(path, root),
        description=header.description,
        body=body.strip(),
        path=path,
        allowed_tools=tuple(allowed_tools) if allowed_tools is not None else None,
        metadata=dict(header.metadata) if header.metadata is not None else None,
        license=header.license,
    )

def split_frontmatter(contents: str) -> Optional[tuple[str, str]]:
    # Only "\n" ends a line here; the body is sliced out of ``contents``
    # unchanged so form feeds and Unicode separators in it survive.
    contents = contents.lstrip("\ufeff")
    lines = contents.split("\n")
    if lines[0].strip() != "---":
        return None

    offset = len(lines[0]) + 1
    for index, line in enumerate(lines[1:], 1):
        if line.strip() == "---":
            return "\n".join(lines[1:index]), contents[offset + len(line) + 1:]
        offset += len(line) + 1
    return None
