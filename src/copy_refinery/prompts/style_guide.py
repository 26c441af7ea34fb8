"""Prompts for style guide generation and parsing of the dual-guide answer."""

from __future__ import annotations

import re

from copy_refinery.prompts.builder import PromptPair

COMPREHENSIVE_MARKER = "UMFASSENDER STYLE GUIDE"
CONCISE_MARKER = "PRÄZISER STYLE GUIDE"

STYLE_GUIDE_SYSTEM = f"""\
Du bist ein Experte für Textanalyse und Stil-Dokumentation. Deine Aufgabe ist es, aus \
gegebenem Beispieltext zwei komplementäre Style Guides zu erstellen, die für verschiedene \
Arten der Textproduktion verwendet werden.

AUFGABE:
Analysiere den gegebenen Beispieltext gründlich und erstelle ZWEI Style Guides: einen \
umfassenden für Grund-Textentwicklung und einen präzisen für Textverfeinerung. Der Output \
soll eine umfassende Charakterisierung des Stils und nichts anderem! Der Inhalt ist völlig \
irrelevant. Dazu zählt auch alles struktur-inhaltliche. Der Output-Prompt soll zum Beispiel \
nicht dahin leiten, zum Anfang einen bestimmten strukturellen Inhalt zu erzwingen. Es geht \
um alles, was den Text beschreibt und nicht inhaltlich ist - also alles stilistische.

ANALYSE-ASPEKTE:
• Tonfall und Stimmung
• Satzstruktur und -länge
• Wortwahl und Vokabular
• Stilistische Besonderheiten
• Zielgruppe und Ansprache (keine inhaltlichen Angaben!)
• Formalitätsgrad
• Rhetorische Mittel

OUTPUT FORMAT:
=== {COMPREHENSIVE_MARKER} (für Grund-Textentwicklung) ===

● TON: [Beschreibung des charakteristischen Tons]
● STIL-MERKMALE: [Spezifische stilistische Charakteristika]
● BEISPIELE: [3-5 konkrete, repräsentative Textausschnitte aus dem Original - achte \
darauf, zwingend im Output zu betonen, dass diese Beispiele nicht als inhaltliche Beispiele \
zu sehen sind, sondern ausschließlich für das Stilverständnis.]
● SCHREIBREGELN: [Konkrete Regeln für konsistente Textproduktion]
● WORTWAHL: [Typische Begriffe, Wendungen und Formulierungsmuster]
● VERMEIDEN: [Was nicht zu diesem Stil passt]

=== {CONCISE_MARKER} (für Textverfeinerung) ===

● TON: [Kernaspekte des Tons - kompakt]
● SATZSTRUKTUR: [Bevorzugte Länge und Rhythmus]
● WORTWAHL: [Schlüsselbegriffe und typische Wendungen]
● FORMALITÄT: [Grad der Förmlichkeit]
● VERMEIDEN: [Wichtigste Stil-Fallen]

WICHTIG: Beide Style Guides sollen konkret und anwendbar sein, damit andere Texte im \
gleichen Stil erstellt werden können. Der umfassende Guide dient der Grund-Textentwicklung, \
der präzise Guide der gezielten Verfeinerung."""

# A marker counts when it appears anywhere on a header line, so "=== X ===",
# "## X" and "**X**" all work.
_COMPREHENSIVE_HEADER = re.compile(rf"^[^\n]*{COMPREHENSIVE_MARKER}[^\n]*(?:\n|\Z)", re.M)
_CONCISE_HEADER = re.compile(rf"^[^\n]*{CONCISE_MARKER}[^\n]*(?:\n|\Z)", re.M)


def build_style_guide_prompts(example_text: str, additional_instructions: str = "") -> PromptPair:
    parts = [f'BEISPIELTEXT ZUM ANALYSIEREN:\n"{example_text}"']
    if additional_instructions:
        parts.append(f"ZUSÄTZLICHE ANWEISUNGEN:\n{additional_instructions}")
    parts.append(
        "AUFGABE: Erstelle BEIDE Style Guides (umfassend + präzise) basierend auf diesem Beispieltext."
    )
    return PromptPair(system=STYLE_GUIDE_SYSTEM, user="\n\n".join(parts))


def parse_style_guide(full_response: str) -> tuple[str, str]:
    """Split a dual-guide answer into (comprehensive, concise).

    Without a comprehensive header the whole response is the comprehensive
    guide; without a concise header the concise guide is empty.
    """
    comprehensive_match = _COMPREHENSIVE_HEADER.search(full_response)
    concise_match = _CONCISE_HEADER.search(full_response)

    if comprehensive_match:
        start = comprehensive_match.end()
        end = len(full_response)
        if concise_match and concise_match.start() >= start:
            end = concise_match.start()
        comprehensive = full_response[start:end].strip()
    else:
        comprehensive = full_response

    concise = full_response[concise_match.end():].strip() if concise_match else ""
    return comprehensive, concise
