"""Tests for the token renderer."""

import pytest

from bgreflector.core.grammar import TagFamily
from bgreflector.core.lookup import LookupTables
from bgreflector.core.renderer import (
    CharWidthClass,
    RenderOptions,
    StyleStack,
    UnitKind,
    classify_char_width,
    render,
    render_text,
    reveal_hidden_chars,
    visible_text,
)
from bgreflector.core.tokenizer import Tag, tokenize


def _render(line: str, **options) -> list:
    return render(tokenize(line), RenderOptions(**options))


class TestPlainText:
    @pytest.mark.parametrize("line", ["", "hello", "가나다 라마", "a < b", "100% \\ done"])
    def test_no_options_reproduces_line(self, line: str) -> None:
        assert visible_text(_render(line)) == line

    def test_single_text_unit_per_run(self) -> None:
        units = _render("hello world")
        assert len(units) == 1
        assert units[0].kind is UnitKind.TEXT


class TestIcons:
    def test_key_action_label(self) -> None:
        units = _render('<Icon KeyAction="WeaponSkill_Slot_Smite"/>')
        assert len(units) == 1
        assert units[0].kind is UnitKind.KEY_CAP
        assert units[0].text == "X"

    def test_unknown_key_action(self) -> None:
        assert _render('<Icon KeyAction="Nope"/>')[0].text == "?"

    def test_icon_id_fallback(self) -> None:
        assert _render("<Icon UIKeySpecificIconId='101'/>")[0].text == "Z"

    def test_key_action_wins_over_icon_id(self) -> None:
        units = _render("<Icon KeyAction='Nope' UIKeySpecificIconId='103'/>")
        assert units[0].text == "?"

    def test_no_attributes(self) -> None:
        assert _render("<Icon/>")[0].text == "?"

    def test_replaced_tables(self) -> None:
        tables = LookupTables.from_mapping({"icon_keys": {"Jump": "Space"}})
        units = render(tokenize("<Icon KeyAction='Jump'/>"), tables=tables)
        assert units[0].text == "Space"


class TestPlaceholders:
    def test_date_codes(self) -> None:
        assert visible_text(_render("%Y-%m-%d %H:%M")) == "2025-06-15 14:30"

    def test_param_alias_cms_badges(self) -> None:
        units = _render("<param Name='Count'/><alias Name='Town'/><cms Name='Event'/>")
        assert [u.kind for u in units] == [UnitKind.BADGE] * 3
        assert [u.text for u in units] == ["{Count}", "[Town]", "「Event」"]

    def test_badge_without_name(self) -> None:
        assert _render("<param/>")[0].text == "{?}"

    def test_player_name(self) -> None:
        units = _render("<PlayerName/>")
        assert units[0].kind is UnitKind.PLAYER_NAME
        assert units[0].text == "Player"

    def test_unknown_markup_is_shown_raw(self) -> None:
        units = _render("<b>")
        assert units[0].kind is UnitKind.RAW_TAG
        assert units[0].text == "<b>"


class TestStyleScopes:
    def test_font_style_applies_until_close(self) -> None:
        units = _render('a<FontStyle name="Bold">b</FontStyle>c')
        assert visible_text(units) == "abc"
        assert [u.styles for u in units] == [(), ("Bold",), ()]

    def test_nested_styles_combine(self) -> None:
        units = _render('<FontStyle name="Bold"><FontStyle name="Red">x</FontStyle>y</FontStyle>')
        assert [u.styles for u in units] == [("Bold", "Red"), ("Bold",)]

    def test_span_color_scope(self) -> None:
        units = _render('<span color="#FF0000">r</>n')
        assert units[0].color == "#FF0000"
        assert units[1].color is None

    def test_stray_close_does_not_raise(self) -> None:
        units = _render("</FontStyle></>x")
        assert visible_text(units) == "x"

    def test_stack_resets_per_line(self) -> None:
        lines = render_text('<FontStyle name="Bold">a\nb')
        assert lines[0][0].styles == ("Bold",)
        assert lines[1][0].styles == ()

    def test_style_applies_to_placeholders(self) -> None:
        units = _render('<FontStyle name="Grade_Rare"><PlayerName/></FontStyle>')
        assert units[0].styles == ("Grade_Rare",)

    def test_style_stack_directly(self) -> None:
        stack = StyleStack()
        stack.push_style("Bold")
        stack.push_color("#111111")
        stack.push_color("#222222")
        assert stack.styles == ("Bold",)
        assert stack.color == "#222222"
        stack.pop_color()
        assert stack.color == "#111111"
        stack.reset()
        assert stack.styles == ()
        assert stack.color is None


class TestLineBreaks:
    def test_escape_break_hidden_by_default(self) -> None:
        units = _render("a\\nb")
        assert units[1].kind is UnitKind.LINE_BREAK
        assert units[1].text == ""

    def test_escape_break_glyph(self) -> None:
        units = _render("a\\rb", show_line_breaks=True)
        assert units[1].text == "↵"
        assert units[1].tooltip == "\\r"


class TestHiddenChars:
    def test_whitespace_glyphs_are_distinct(self) -> None:
        revealed = reveal_hidden_chars(" \t\r\n")
        assert len(set(revealed)) == 4
        assert not any(ch.isspace() for ch in revealed)

    def test_hidden_chars_option(self) -> None:
        assert visible_text(_render("a b", show_hidden_chars=True)) == "a·b"


class TestCharWidthRule:
    def test_classification(self) -> None:
        assert classify_char_width("。") is CharWidthClass.FULL_WIDTH_PUNCTUATION
        assert classify_char_width("7") is CharWidthClass.HALF_WIDTH_DIGIT
        assert classify_char_width("(") is CharWidthClass.HALF_WIDTH_BRACKET
        assert classify_char_width("-") is CharWidthClass.HALF_WIDTH_SYMBOL
        assert classify_char_width("가") is CharWidthClass.NONE

    def test_per_character_units(self) -> None:
        units = _render("1+가", show_char_width_rule=True)
        assert [u.width_class for u in units] == [
            CharWidthClass.HALF_WIDTH_DIGIT, CharWidthClass.HALF_WIDTH_SYMBOL, CharWidthClass.NONE,
        ]
        assert units[0].tooltip == "Half-width digit"
        assert units[2].tooltip == ""

    def test_width_rule_after_hidden_chars(self) -> None:
        units = _render("1 2", show_char_width_rule=True, show_hidden_chars=True)
        assert visible_text(units) == "1·2"
        assert len(units) == 3


class TestTotality:
    @pytest.mark.parametrize("line", ["<", "<>", "<Icon", "</>", "<FontStyle>", "%", "\\", "<span color=>"])
    def test_malformed_markup_never_raises(self, line: str) -> None:
        options = RenderOptions(show_hidden_chars=True, show_char_width_rule=True, show_line_breaks=True)
        assert isinstance(render(tokenize(line), options), list)

    def test_manual_tag_without_attributes(self) -> None:
        units = render([Tag("<FontStyle>", TagFamily.FONT_STYLE_OPEN), Tag("x", TagFamily.LITERAL)])
        assert units[0].styles == ("?",)
