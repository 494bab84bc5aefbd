"""Tests for the full source/target QA pass."""

from bgreflector.core.grammar import TagFamily
from bgreflector.core.qa_pass import check_document, check_pair

SOURCE = "<Icon KeyAction='WeaponSkill_Slot_Basic'/> 공격\n<FontStyle name=\"Bold\">주의</FontStyle>"


class TestCheckPair:
    def test_clean_pair(self) -> None:
        target = "<Icon KeyAction='WeaponSkill_Slot_Basic'/> Attack\n<FontStyle name=\"Bold\">Warning</FontStyle>"
        report = check_pair(SOURCE, target)
        assert report.ok
        assert report.source.line_count == 2
        assert report.source.stats["Icon"] == 1
        assert "PASS" in report.summary()

    def test_missing_tags_land_on_target_side(self) -> None:
        report = check_pair(SOURCE, "Attack\n<FontStyle name=\"Bold\">Warning")
        assert report.source.ok
        lines = [d.line_number for d in report.target.diagnostics]
        # structural issue on target line 2, missing icon at source line 1
        assert lines == [2, 1]
        assert len(report.missing_in_target) == 1
        assert report.issues == 2
        assert "FAIL" in report.summary()

    def test_families_are_configurable(self) -> None:
        source = "<param Name='n'/>"
        assert check_pair(source, "", families=[TagFamily.ICON]).ok
        assert not check_pair(source, "", families=[TagFamily.PARAM]).ok

    def test_truncated_policy_passthrough(self) -> None:
        source = "<Icon KeyAction='A'/>"
        damaged = "<Icon KeyAction='A'>"
        suppressed = check_pair(source, damaged, suppress_truncated=True)
        reported = check_pair(source, damaged, suppress_truncated=False)
        assert len(suppressed.missing_in_target) == 0
        assert len(reported.missing_in_target) == 1
        # the damaged copy is flagged structurally either way
        assert len(suppressed.target.diagnostics) == 1

    def test_stats_summary(self) -> None:
        report = check_pair(SOURCE, "")
        assert "Icon 1" in report.stats_summary()


class TestCheckDocument:
    def test_empty_document(self) -> None:
        report = check_document("")
        assert report.ok
        assert report.line_count == 1
