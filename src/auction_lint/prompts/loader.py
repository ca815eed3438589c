"""Load Markdown prompt templates with YAML front-matter and render them with jinja2."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from jinja2 import BaseLoader, Environment

logger = logging.getLogger(__name__)

PROMPTS_DIR = Path(__file__).parent

_ENV = Environment(loader=BaseLoader())


class PromptTemplate:
    def __init__(self, prompt_id: str, content: str, metadata: Dict[str, Any]):
        self.id = prompt_id
        self.content = content
        self.version = metadata.get("version", "v1")
        self.description = metadata.get("description", "")
        self.requires = metadata.get("requires", [])
        self.system: Optional[str] = metadata.get("system")
        self.defaults: Dict[str, Any] = metadata.get("defaults", {})

    def render(self, **kwargs) -> str:
        values = {**self.defaults, **{k: v for k, v in kwargs.items() if v is not None}}
        return _ENV.from_string(self.content).render(**values)


def get_prompt_path(prompt_id: str) -> Path:
    return PROMPTS_DIR / f"{prompt_id}.md"


@lru_cache(maxsize=32)
def _load_prompt_file(prompt_id: str) -> PromptTemplate:
    path = get_prompt_path(prompt_id)
    if not path.exists():
        raise FileNotFoundError(f"Prompt file not found: {path}")

    content = path.read_text(encoding="utf-8")
    metadata, template_content = _parse_frontmatter(content)
    return PromptTemplate(prompt_id, template_content, metadata)


def _parse_frontmatter(content: str) -> tuple[Dict[str, Any], str]:
    if not content.startswith("---"):
        return {}, content

    parts = content.split("---", 2)
    if len(parts) < 3:
        return {}, content

    try:
        metadata = yaml.safe_load(parts[1]) or {}
    except yaml.YAMLError:
        logger.warning("Failed to parse YAML frontmatter")
        metadata = {}

    return metadata, parts[2].strip()


def load_prompt(prompt_id: str, **kwargs) -> str:
    """Render a prompt; raises ValueError when a required variable is missing."""
    template = _load_prompt_file(prompt_id)
    missing = [r for r in template.requires if kwargs.get(r) in (None, "")]
    if missing:
        raise ValueError(f"Prompt '{prompt_id}' missing required vars: {missing}")
    return template.render(**kwargs)


def load_system_prompt(prompt_id: str) -> Optional[str]:
    return _load_prompt_file(prompt_id).system


def reload_prompts() -> None:
    _load_prompt_file.cache_clear()
