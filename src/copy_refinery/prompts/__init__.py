"""Prompt templates and builders."""

from copy_refinery.prompts.builder import PromptPair, build_prompts
from copy_refinery.prompts.style_guide import build_style_guide_prompts, parse_style_guide

__all__ = [
    "PromptPair",
    "build_prompts",
    "build_style_guide_prompts",
    "parse_style_guide",
]
