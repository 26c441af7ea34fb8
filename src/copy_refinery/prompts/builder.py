"""Turns a prompt kind, text, instruction and options into a prompt pair."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from copy_refinery.models.actions import PromptKind
from copy_refinery.models.transform import TransformOptions
from copy_refinery.prompts import templates as t

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PromptPair:
    system: str
    user: str


def build_prompts(
    kind: PromptKind,
    text: str,
    instruction: str,
    options: TransformOptions | None = None,
) -> PromptPair:
    """Render the system and user prompt for one transformation.

    Text, instruction and context are interpolated verbatim; the text is
    only wrapped in double quotes. Instructions are not validated.
    """
    options = options or TransformOptions()
    style_guide = options.selected_style_guide(kind)
    json_mode = options.mode == "json"

    if kind is PromptKind.GENERIC:
        system = t.GENERIC_SYSTEM
    else:
        system = _dedicated_system(kind, t.DEDICATED[kind], json_mode, style_guide)
    user = _user_prompt(kind, text, instruction, options)

    logger.debug(
        "Built prompts: kind=%s mode=%s context_len=%d style_guide=%s user_len=%d",
        kind.value,
        options.mode,
        len(options.context or ""),
        style_guide is not None,
        len(user),
    )
    return PromptPair(system=system, user=user)


def _dedicated_system(
    kind: PromptKind,
    tpl: t.TemplateText,
    json_mode: bool,
    style_guide: str | None,
) -> str:
    sections = [tpl.role, f"DEINE AUFGABE:\n{tpl.task} {t.SCOPE_RULE}"]
    if json_mode:
        sections.append(
            t.JSON_MODE_BLOCK.format(
                task_verb=t.JSON_TASK_VERBS[kind], focus=tpl.json_focus, verb=tpl.verb
            )
        )
    sections.append(
        tpl.principles_header + "\n" + "\n".join(f"• {p}" for p in tpl.principles)
    )
    sections.extend(tpl.extra_sections)
    if style_guide:
        sections.append(t.STYLE_GUIDE_BLOCK.format(use=tpl.style_guide_use, guide=style_guide))
    sections.append(
        t.OUTPUT_RULE.format(
            noun=tpl.output_noun,
            quality=tpl.output_quality,
            noun_genitive=f"{tpl.output_noun}es",
        )
    )
    return "\n\n".join(sections)


def _user_prompt(
    kind: PromptKind,
    text: str,
    instruction: str,
    options: TransformOptions,
) -> str:
    if kind is PromptKind.GENERIC:
        label = t.GENERIC_TEXT_LABEL
        reference = t.GENERIC_CONTEXT_REFERENCE
        closing = t.GENERIC_CLOSING_TASK
    else:
        tpl = t.DEDICATED[kind]
        label = f"{tpl.text_label}:"
        reference = tpl.text_label
        closing = tpl.closing_task

    parts = [f'{label}\n"{text}"', f"ANWEISUNGEN:\n{instruction}"]
    if options.context:
        parts.append(t.CONTEXT_BLOCK.format(context=options.context, label=reference))
    if kind is PromptKind.GENERIC:
        hints = []
        if options.tone:
            hints.append(f"Gewünschter Ton: {options.tone}")
        if options.target_length:
            hints.append(f"Ziellänge: {options.target_length}")
        if hints:
            parts.append("\n".join(hints))
    parts.append(f"AUFGABE: {closing}")
    return "\n\n".join(parts)
