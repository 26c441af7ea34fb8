"""Tests for prompt construction."""

from copy_refinery.models.actions import PromptKind
from copy_refinery.models.transform import TransformOptions
from copy_refinery.prompts import templates
from copy_refinery.prompts.builder import build_prompts


class TestSystemPrompt:
    def test_each_kind_uses_its_own_template(self):
        seen = set()
        for kind in PromptKind:
            system = build_prompts(kind, "text", "instr").system
            seen.add(system)
        assert len(seen) == len(PromptKind)

    def test_articulate_template(self):
        system = build_prompts(PromptKind.ARTICULATE, "t", "i").system
        assert system.startswith(templates.ARTICULATE.role)
        assert "TRANSFORMATION PRINCIPLES:" in system
        assert "INDUKTIVES COPYWRITING-PRINZIP" in system
        assert "nur der reine, ausformulierte Text." in system
        assert "mit dem ersten Wort des transformierten Textes" in system

    def test_refine_template_has_no_articulate_sections(self):
        system = build_prompts(PromptKind.REFINE, "t", "i").system
        assert "VERFEINERUNGS-PRINZIPIEN:" in system
        assert "INDUKTIVES" not in system

    def test_generic_template(self):
        system = build_prompts(PromptKind.GENERIC, "t", "i").system
        assert system == templates.GENERIC_SYSTEM

    def test_json_mode_block_only_in_json_mode(self):
        plain = build_prompts(PromptKind.EDIT, "t", "i").system
        json_mode = build_prompts(PromptKind.EDIT, "t", "i", TransformOptions(mode="json")).system
        assert "JSON TEMPLATE MODUS" not in plain
        assert "JSON TEMPLATE MODUS" in json_mode
        assert "nach der Anweisung bearbeiten" in json_mode
        assert "Du bearbeitest NUR den selektierten Copy-Text" in json_mode


class TestStyleGuideBlock:
    guide = {"comprehensiveGuide": "COMPREHENSIVE RULES", "conciseGuide": "CONCISE RULES"}

    def _system(self, kind: PromptKind) -> str:
        options = TransformOptions.model_validate({"styleGuide": self.guide})
        return build_prompts(kind, "t", "i", options).system

    def test_articulate_uses_comprehensive_guide(self):
        system = self._system(PromptKind.ARTICULATE)
        assert "STIL-VORGABEN:" in system
        assert "COMPREHENSIVE RULES" in system
        assert "CONCISE RULES" not in system

    def test_refine_and_edit_use_concise_guide(self):
        for kind in (PromptKind.REFINE, PromptKind.EDIT):
            system = self._system(kind)
            assert "CONCISE RULES" in system
            assert "COMPREHENSIVE RULES" not in system

    def test_block_placed_before_output_rule(self):
        system = self._system(PromptKind.REFINE)
        assert system.index("STIL-VORGABEN:") < system.index("WICHTIGE OUTPUT-REGEL:")

    def test_no_block_without_guide(self):
        system = build_prompts(PromptKind.REFINE, "t", "i").system
        assert "STIL-VORGABEN" not in system

    def test_braces_in_guide_are_kept_verbatim(self):
        options = TransformOptions(style_guide="Use {placeholders} like {name}")
        system = build_prompts(PromptKind.REFINE, "t", "i", options).system
        assert "Use {placeholders} like {name}" in system


class TestUserPrompt:
    def test_text_quoted_and_instruction_verbatim(self):
        user = build_prompts(PromptKind.EDIT, "Hallo Welt", "Mach es {formeller}").user
        assert user.startswith('TEXT ZUM BEARBEITEN:\n"Hallo Welt"')
        assert "ANWEISUNGEN:\nMach es {formeller}" in user
        assert user.endswith(
            "AUFGABE: Führe die Bearbeitungsanweisung präzise NUR am markierten Text aus."
        )

    def test_generic_label(self):
        user = build_prompts(PromptKind.GENERIC, "abc", "do it").user
        assert user.startswith('Forme diesen Text um:\n"abc"')

    def test_context_block(self):
        options = TransformOptions(context="Der ganze Editor-Text")
        user = build_prompts(PromptKind.REFINE, "abc", "i", options).user
        assert "KONTEXT (Gesamter Text im Editor" in user
        assert "Der ganze Editor-Text" in user
        assert '("TEXT ZUM VERFEINERN")' in user

    def test_no_context_block_without_context(self):
        user = build_prompts(PromptKind.REFINE, "abc", "i").user
        assert "KONTEXT" not in user

    def test_generic_hints(self):
        options = TransformOptions(tone="warm", target_length="kürzer")
        user = build_prompts(PromptKind.GENERIC, "abc", "i", options).user
        assert "Gewünschter Ton: warm" in user
        assert "Ziellänge: kürzer" in user

    def test_dedicated_kinds_ignore_hints(self):
        options = TransformOptions(tone="warm")
        user = build_prompts(PromptKind.REFINE, "abc", "i", options).user
        assert "Gewünschter Ton" not in user
