import os

import whenpresent.directives as directives
import whenpresent.unittesthelper as uth
from whenpresent.directives import DirectiveKind


class TestParseDirective:
    def test_conditional_keywords(self):
        assert directives.parse_directive("#if A") == (DirectiveKind.OPEN, "if")
        assert directives.parse_directive("#ifdef A") == (DirectiveKind.OPEN, "ifdef")
        assert directives.parse_directive("#ifndef A") == (DirectiveKind.OPEN, "ifndef")
        assert directives.parse_directive("#elif B") == (DirectiveKind.BRANCH_SWITCH, "elif")
        assert directives.parse_directive("#else") == (DirectiveKind.BRANCH_SWITCH, "else")
        assert directives.parse_directive("#endif") == (DirectiveKind.CLOSE, "endif")

    def test_whitespace_before_and_after_hash(self):
        assert directives.parse_directive("   #   if X") == (DirectiveKind.OPEN, "if")
        assert directives.parse_directive("\t#\tendif // X") == (DirectiveKind.CLOSE, "endif")

    def test_keyword_is_letters_only(self):
        assert directives.parse_directive("#if(A)") == (DirectiveKind.OPEN, "if")
        assert directives.parse_directive("#endif/* done */") == (DirectiveKind.CLOSE, "endif")
        assert directives.parse_directive("#ifx") == (DirectiveKind.IRRELEVANT, "ifx")

    def test_keywords_are_case_sensitive(self):
        assert directives.parse_directive("#IF A")[0] is DirectiveKind.IRRELEVANT
        assert directives.parse_directive("#Endif")[0] is DirectiveKind.IRRELEVANT

    def test_other_directives_are_irrelevant(self):
        for text in ("#include <stdio.h>", "#define X 1", "#pragma once", "#error no"):
            assert directives.parse_directive(text)[0] is DirectiveKind.IRRELEVANT

    def test_non_directives(self):
        assert directives.parse_directive("") == (DirectiveKind.IRRELEVANT, None)
        assert directives.parse_directive("   ") == (DirectiveKind.IRRELEVANT, None)
        assert directives.parse_directive("int x; #if") == (DirectiveKind.IRRELEVANT, None)
        assert directives.parse_directive("// #if A") == (DirectiveKind.IRRELEVANT, None)

    def test_malformed_directives(self):
        assert directives.parse_directive("#") == (DirectiveKind.IRRELEVANT, None)
        assert directives.parse_directive("#   ") == (DirectiveKind.IRRELEVANT, None)
        assert directives.parse_directive("# 1 \"file.c\"") == (DirectiveKind.IRRELEVANT, None)


class TestLogicalLines:
    def test_plain_lines(self):
        result = list(directives.logical_lines(["a", "b", "c"]))
        assert [ll.line_number for ll in result] == [1, 2, 3]
        assert all(ll.lines_consumed == 1 for ll in result)

    def test_continuation_joins_lines(self):
        lines = ["#if A && \\", "    B", "int x;"]
        result = list(directives.logical_lines(lines))
        assert len(result) == 2
        assert result[0].text == "#if A && \\\n    B"
        assert result[0].line_number == 1
        assert result[0].lines_consumed == 2
        # Numbering skips the consumed line
        assert result[1].text == "int x;"
        assert result[1].line_number == 3

    def test_multiple_continuations(self):
        lines = ["x", "#if A \\", "&& B \\", "&& C", "y"]
        result = list(directives.logical_lines(lines))
        assert [(ll.line_number, ll.lines_consumed) for ll in result] == [
            (1, 1),
            (2, 3),
            (5, 1),
        ]

    def test_trailing_backslash_at_end_of_input(self):
        result = list(directives.logical_lines(["a", "b \\"]))
        assert [(ll.text, ll.line_number) for ll in result] == [("a", 1), ("b \\", 2)]

    def test_empty_input(self):
        assert list(directives.logical_lines([])) == []


class TestScan:
    def test_scan_reports_every_logical_line(self):
        lines = uth.source_lines(
            """
            #ifdef FOO
            int x;
            #else
            #endif
            """
        )
        kinds = [sd.kind for sd in directives.scan(lines)]
        assert kinds == [
            DirectiveKind.OPEN,
            DirectiveKind.IRRELEVANT,
            DirectiveKind.BRANCH_SWITCH,
            DirectiveKind.CLOSE,
        ]

    def test_scan_keeps_raw_text(self):
        scanned = list(directives.scan(["  #  if  A > 1 // comment"]))
        assert scanned[0].text == "  #  if  A > 1 // comment"

    def test_continued_directive_is_classified_once(self):
        scanned = list(directives.scan(["#if defined(A) \\", "    && defined(B)", "#endif"]))
        assert [(sd.kind, sd.line_number) for sd in scanned] == [
            (DirectiveKind.OPEN, 1),
            (DirectiveKind.CLOSE, 3),
        ]


class TestReadLines:
    def test_read_sample(self):
        lines = list(directives.read_lines(os.path.join(uth.samplesdir(), "nested.c")))
        assert lines[0] == "#include <stdio.h>"
        assert lines[2] == "#ifdef FOO"
        assert len(lines) == 9

    def test_line_terminators_removed(self):
        with uth.TempDirContext():
            with open("crlf.c", "w", newline="") as ff:
                ff.write("#if A\r\nint x;\r\n#endif\r\n")
            assert list(directives.read_lines("crlf.c")) == ["#if A", "int x;", "#endif"]
