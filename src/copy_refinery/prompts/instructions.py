"""Preset instructions for actions that don't take one from the caller."""

from __future__ import annotations

from copy_refinery.models.transform import TransformOptions

ARTICULATE_INSTRUCTION = (
    "Entwickle aus der gegebenen Gedankenstruktur einen vollständig ausformulierten, "
    "fließenden Text. Schaffe natürliche Übergänge, fülle logische Lücken und verwandle "
    "Fragmente in kohärente, überzeugende Prosa."
)

REFINE_INSTRUCTION = (
    "Verfeinere diesen Text durch Optimierung von Formulierung, Grammatik und Stil. "
    "Verbessere Klarheit und Lesbarkeit, während du die ursprüngliche Aussage und den "
    "Charakter des Textes vollständig bewahrst."
)


def shorten_instruction(options: TransformOptions) -> str:
    reduction = (
        f"Aim to reduce length by approximately {options.target_reduction}."
        if options.target_reduction
        else "Aim to reduce length by 30-50%."
    )
    return (
        "Make this text shorter and more concise. Remove unnecessary words, redundancy, "
        "and verbose phrasing while keeping all essential information and meaning. "
        + reduction
    )


def elongate_instruction(options: TransformOptions) -> str:
    expansion = options.expansion_type or "Add depth and richness to the content"
    return (
        "Expand this text by adding relevant details, examples, and elaboration. "
        f"{expansion} while maintaining the original message and tone. Do not repeat the "
        "same ideas - add genuinely new information."
    )


def simplify_instruction(options: TransformOptions) -> str:
    audience = (
        f"Write for {options.target_audience}."
        if options.target_audience
        else "Write for a general audience."
    )
    return (
        "Simplify this text to make it easier to understand. Use simpler words, shorter "
        f"sentences, and clearer structure. {audience} Avoid jargon and complex terminology."
    )
