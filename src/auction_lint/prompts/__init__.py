"""Oracle prompt templates and their loader."""

from auction_lint.prompts.loader import get_prompt_path, load_prompt, load_system_prompt, reload_prompts

__all__ = ["load_prompt", "load_system_prompt", "get_prompt_path", "reload_prompts"]
