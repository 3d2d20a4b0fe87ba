"""Tests for the block parser and its region tracking."""
import pytest

from spark_report.parser import TocEntry, convert_markdown, detect_phase


def section_fragments(section):
    return section.split("\n")


class TestDetectPhase:

    @pytest.mark.parametrize("text, expected", [
        ("Seed: Ava", ("seed", "Ava")),
        ("seed:   Ava Smith ", ("seed", "Ava Smith")),
        ("Cross-Pollination: Kai", ("cross", "Kai")),
        ("Cross-Pollination Round 2: Kai", ("cross", "Kai")),
        ("Session Record", ("session-record", None)),
        ("session  record", ("session-record", None)),
        ("Synthesis", ("synthesis", None)),
        ("SYNTHESIS", ("synthesis", None)),
        ("Synthesis Notes", ("", None)),
        ("Seed Ideas", ("", None)),
        ("Overview", ("", None)),
    ])
    def test_phases(self, text, expected):
        """Level-2 heading text maps to a phase and an optional persona."""
        assert detect_phase(text) == expected


class TestHeadings:

    def test_last_level_one_heading_wins(self):
        """Each level-1 heading replaces the title and emits nothing."""
        report = convert_markdown("# First\n# Second")
        assert report.title == "Second"
        assert report.preamble == []
        assert report.toc == []

    def test_untitled_document(self):
        report = convert_markdown("Just text.")
        assert report.title == ""
        assert report.preamble == ["<p>Just text.</p>"]

    def test_level_two_opens_section(self):
        report = convert_markdown("## Overview\nHello")
        assert report.sections == [
            '<section id="overview" class="section">\n<h2>Overview</h2>\n<p>Hello</p>\n</section>'
        ]
        assert report.toc == [TocEntry(id="overview", text="Overview", level=2)]

    def test_session_record_section_class(self):
        report = convert_markdown("## Session Record")
        assert report.sections[0].startswith(
            '<section id="session-record" class="section session-record-section">'
        )
        assert report.toc[0].phase == "session-record"

    def test_seed_persona_subsection(self):
        """A subsection under a persona section becomes a coloured persona block."""
        report = convert_markdown("## Seed: Ava\n### Idea One\nBody")
        assert section_fragments(report.sections[0]) == [
            '<section id="seed-ava" class="section">',
            "<h2>Seed: Ava</h2>",
            '<div class="persona-section persona-teal" id="seed-ava-idea-one">',
            '<h3><span class="persona-badge" style="color:#2a7d6e;'
            'background:rgba(42,125,110,0.08)">Idea One</span></h3>',
            '<div class="persona-content">',
            "<p>Body</p>",
            "</div></div>",
            "</section>",
        ]
        assert report.toc == [
            TocEntry(id="seed-ava", text="Seed: Ava", level=2, phase="seed", persona="Ava"),
            TocEntry(id="seed-ava-idea-one", text="Idea One", level=3, phase="", persona="Ava"),
        ]

    def test_persona_badge_text_is_escaped_not_formatted(self):
        report = convert_markdown("## Seed: Ava\n### *Bold* <idea>")
        assert "*Bold* &lt;idea&gt;</span></h3>" in report.sections[0]

    def test_next_subsection_closes_persona_block(self):
        """Opening a new subsection closes the previous persona block first."""
        report = convert_markdown("## Seed: Ava\n### One\n### Two")
        fragments = section_fragments(report.sections[0])
        assert fragments.count("</div></div>") == 2
        assert fragments.index("</div></div>") < fragments.index(
            '<div class="persona-section persona-teal" id="seed-ava-two">'
        )

    def test_plain_subsection_under_non_persona_section(self):
        report = convert_markdown("## Overview\n### Details *here*")
        assert '<h3 id="overview-details-here">Details <em>here</em></h3>' in report.sections[0]
        assert report.toc[1] == TocEntry(id="overview-details-here", text="Details *here*", level=3)

    def test_subsection_before_any_section(self):
        report = convert_markdown("### Lonely")
        assert report.preamble == ['<h3 id="lonely">Lonely</h3>']
        assert report.toc == [TocEntry(id="lonely", text="Lonely", level=3)]

    def test_level_four_heading_is_not_in_toc(self):
        report = convert_markdown("## Seed: Ava\n### Idea\n#### Deep *dive*\nMore")
        fragments = section_fragments(report.sections[0])
        assert "<h4>Deep <em>dive</em></h4>" in fragments
        assert fragments.index("<h4>Deep <em>dive</em></h4>") < fragments.index("</div></div>")
        assert [entry.level for entry in report.toc] == [2, 3]

    def test_cross_pollination_reuses_persona_color(self):
        """A persona keeps the colour it was first given."""
        report = convert_markdown(
            "## Seed: Ava\n## Seed: Kai\n## Cross-Pollination Round 1: Ava\n### Riff"
        )
        assert 'class="persona-section persona-teal" id="cross-pollination-round-1-ava-riff"' in report.sections[2]
        assert [name for name, _ in report.colors.items()] == ["Ava", "Kai"]

    def test_colors_cycle_across_seven_personas(self):
        names = ["Ava", "Kai", "Mia", "Leo", "Zoe", "Ian", "Uma"]
        markdown = "\n".join(f"## Seed: {name}\n### Idea" for name in names)
        report = convert_markdown(markdown)
        assert report.colors.color_for("Uma") == report.colors.color_for("Ava")
        assert "persona-teal" in report.sections[6]

    def test_stray_hash_lines_become_paragraphs(self):
        """Hash lines that are not headings are consumed as text."""
        report = convert_markdown("#hashtag here\nmore\n\n##### Too deep")
        assert report.preamble == ["<p>#hashtag here\nmore</p>", "<p>##### Too deep</p>"]


class TestMetadataAndRules:

    def test_metadata_then_synthesis(self):
        """Leading metadata is captured and the rule after it is dropped."""
        report = convert_markdown(
            "> **Personas**: Ava, Kai | **Date**: 2024-03-01\n\n---\n\n## Synthesis\nText."
        )
        assert report.metadata == {"personas": "Ava, Kai", "date": "2024-03-01"}
        assert report.preamble == []
        assert report.sections == [
            '<section id="synthesis" class="section synthesis-section">\n'
            "<h2>Synthesis</h2>\n"
            '<div class="synthesis-callout">\n'
            "<p>Text.</p>\n"
            "</div>\n"
            "</section>"
        ]
        assert "<hr>" not in report.sections[0]

    def test_only_one_rule_is_suppressed(self):
        """Only the first rule after metadata is swallowed."""
        report = convert_markdown("> **Focus**: x\n\n---\n\n---")
        assert report.preamble == ["<hr>"]

    def test_rule_without_metadata_is_kept(self):
        report = convert_markdown("Intro\n\n---")
        assert report.preamble == ["<p>Intro</p>", "<hr>"]

    def test_rule_inside_section_is_not_suppressed(self):
        report = convert_markdown("> **Focus**: x\n\n## Overview\n---")
        assert "<hr>" in section_fragments(report.sections[0])

    def test_rule_closes_synthesis_callout(self):
        """The first rule ends the callout; later rules render normally."""
        report = convert_markdown("## Synthesis\nA\n---\nB\n---\nC")
        assert section_fragments(report.sections[0]) == [
            '<section id="synthesis" class="section synthesis-section">',
            "<h2>Synthesis</h2>",
            '<div class="synthesis-callout">',
            "<p>A</p>",
            "</div>",
            "<p>B</p>",
            "<hr>",
            "<p>C</p>",
            "</section>",
        ]

    def test_non_metadata_blockquote_is_rendered(self):
        report = convert_markdown("> line one\n>*line two*")
        assert report.metadata is None
        assert report.preamble == ["<blockquote>line one<br><em>line two</em></blockquote>"]

    def test_metadata_only_from_leading_blockquote(self):
        report = convert_markdown("Intro\n\n> **Key**: value")
        assert report.metadata is None
        assert report.preamble[1] == "<blockquote><strong>Key</strong>: value</blockquote>"

    def test_blockquote_inside_section_is_content(self):
        report = convert_markdown("## Overview\n> **Key**: value")
        assert report.metadata is None
        assert "<blockquote><strong>Key</strong>: value</blockquote>" in report.sections[0]

    def test_second_metadata_blockquote_is_content(self):
        """Metadata is read once; later blockquotes are ordinary content."""
        report = convert_markdown("> **A**: 1\n\n> **B**: 2")
        assert report.metadata == {"a": "1"}
        assert report.preamble == ["<blockquote><strong>B</strong>: 2</blockquote>"]

    def test_next_section_closes_synthesis_callout(self):
        """A level-2 heading closes an open callout inside the synthesis section."""
        report = convert_markdown("## Synthesis\nA\n## Next\nB")
        assert report.sections[0].endswith("<p>A</p>\n</div>\n</section>")
        assert "</div>" not in report.sections[1]
        assert report.sections[1] == (
            '<section id="next" class="section">\n<h2>Next</h2>\n<p>B</p>\n</section>'
        )


class TestTables:

    def test_header_and_separator_only(self):
        report = convert_markdown("| A | B |\n|---|---|")
        assert report.preamble == [
            '<div class="table-wrap"><table><thead><tr><th>A</th><th>B</th></tr></thead>'
            "<tbody></tbody></table></div>"
        ]

    def test_body_rows_and_inline_cells(self):
        report = convert_markdown("| Name | Note |\n|:--|--:|\n| **Ava** | `x` |\n| Kai | ok |")
        assert report.preamble == [
            '<div class="table-wrap"><table><thead><tr><th>Name</th><th>Note</th></tr></thead><tbody>'
            "<tr><td><strong>Ava</strong></td><td><code>x</code></td></tr>"
            "<tr><td>Kai</td><td>ok</td></tr>"
            "</tbody></table></div>"
        ]

    def test_second_row_is_skipped_whatever_it_holds(self):
        """The separator row is skipped by position, not validated."""
        report = convert_markdown("| A |\n| lost |\n| kept |")
        assert "lost" not in report.preamble[0]
        assert "<td>kept</td>" in report.preamble[0]

    def test_single_line_table_is_dropped(self):
        """A table needs a header and a separator row to render."""
        report = convert_markdown("| lonely | row |\n\nAfter")
        assert report.preamble == ["<p>After</p>"]


class TestLists:

    def test_blank_line_between_items_keeps_one_list(self):
        """A single blank line between items does not end the list."""
        report = convert_markdown("- one\n\n- two")
        assert report.preamble == ["<ul><li>one</li><li>two</li></ul>"]

    def test_star_markers(self):
        report = convert_markdown("* one\n* *two*")
        assert report.preamble == ["<ul><li>one</li><li><em>two</em></li></ul>"]

    def test_ordered_list_with_gap(self):
        report = convert_markdown("1. first\n2. second\n\n3. third")
        assert report.preamble == ["<ol><li>first</li><li>second</li><li>third</li></ol>"]

    def test_two_blank_lines_split_the_list(self):
        """Two blank lines end the list."""
        report = convert_markdown("- a\n\n\n- b")
        assert report.preamble == ["<ul><li>a</li></ul>", "<ul><li>b</li></ul>"]

    def test_list_then_paragraph(self):
        report = convert_markdown("- a\ntext")
        assert report.preamble == ["<ul><li>a</li></ul>", "<p>text</p>"]

    def test_unordered_then_ordered(self):
        report = convert_markdown("- a\n\n1. b")
        assert report.preamble == ["<ul><li>a</li></ul>", "<ol><li>b</li></ol>"]


class TestParagraphsAndCode:

    def test_paragraph_keeps_line_breaks(self):
        report = convert_markdown("one\ntwo\n\nthree")
        assert report.preamble == ["<p>one\ntwo</p>", "<p>three</p>"]

    def test_paragraph_stops_at_block_starters(self):
        """List and blockquote starters interrupt a paragraph."""
        report = convert_markdown("para\n- item\nnext\n> quote")
        assert report.preamble == [
            "<p>para</p>",
            "<ul><li>item</li></ul>",
            "<p>next</p>",
            "<blockquote>quote</blockquote>",
        ]

    def test_code_block_with_language(self):
        report = convert_markdown("```python\nif a < b:\n    pass\n```\nAfter")
        assert report.preamble == [
            '<pre><code class="language-python">if a &lt; b:\n    pass</code></pre>',
            "<p>After</p>",
        ]

    def test_code_block_without_language(self):
        report = convert_markdown("```\n**not bold**\n```")
        assert report.preamble == ["<pre><code>**not bold**</code></pre>"]

    def test_language_tag_is_sanitized(self):
        report = convert_markdown('``` py"th<on> \nx\n```')
        assert report.preamble == ['<pre><code class="language-python">x</code></pre>']

    def test_mermaid_block(self):
        """Mermaid fences become diagram containers and are counted."""
        report = convert_markdown("```mermaid\ngraph TD\nA-->B\n```")
        assert report.preamble == ['<div class="mermaid">graph TD\nA--&gt;B</div>']
        assert report.has_diagrams

    def test_unterminated_fence_consumes_rest(self):
        """An unclosed fence swallows every remaining line."""
        report = convert_markdown("Intro\n```python\nx = 1\n## Not a heading")
        assert report.preamble == [
            "<p>Intro</p>",
            '<pre><code class="language-python">x = 1\n## Not a heading</code></pre>',
        ]
        assert report.sections == []
        assert report.toc == []
        assert not report.has_diagrams


class TestWholeDocument:

    def test_toc(self, spark_report):
        assert [(e.id, e.level, e.phase, e.persona) for e in spark_report.toc] == [
            ("seed-ava", 2, "seed", "Ava"),
            ("seed-ava-guided-tour", 3, "", "Ava"),
            ("seed-ava-checklist", 3, "", "Ava"),
            ("cross-pollination-round-1-kai", 2, "cross", "Kai"),
            ("cross-pollination-round-1-kai-remix", 3, "", "Kai"),
            ("session-record", 2, "session-record", None),
            ("synthesis", 2, "synthesis", None),
            ("synthesis-next-steps", 3, "", None),
        ]

    def test_title_and_metadata(self, spark_report):
        assert spark_report.title == "Spark Report: Onboarding Ideas"
        assert list(spark_report.metadata) == ["personas", "rounds", "focus", "date"]
        assert spark_report.preamble == []
        assert len(spark_report.sections) == 4

    def test_every_section_balances_its_divs(self, spark_report):
        """Every opened div is closed inside its own section."""
        for section in spark_report.sections:
            assert section.count("<div") == section.count("</div>")
            assert section.endswith("</section>")

    def test_synthesis_callout_closed_by_rule(self, spark_report):
        synthesis = section_fragments(spark_report.sections[3])
        assert synthesis[:5] == [
            '<section id="synthesis" class="section synthesis-section">',
            "<h2>Synthesis</h2>",
            '<div class="synthesis-callout">',
            "<p>Combine the tour and checklist.</p>",
            "</div>",
        ]
        assert '<h3 id="synthesis-next-steps">Next Steps</h3>' in synthesis
        assert "<ol><li>Prototype</li><li>Test</li></ol>" in synthesis

    def test_crlf_input(self):
        report = convert_markdown("## Seed: Ava\r\n### Idea\r\nBody\r\n")
        assert report.toc[1].id == "seed-ava-idea"
        assert "<p>Body</p>" in report.sections[0]

    def test_conversions_do_not_share_colors(self):
        """Each conversion starts its colour allocation from scratch."""
        first = convert_markdown("## Seed: Kai\n### A")
        second = convert_markdown("## Seed: Ava\n### A")
        assert first.colors.color_for("Kai").name == "teal"
        assert "persona-teal" in second.sections[0]
        assert "Kai" not in second.colors

    def test_empty_document(self):
        report = convert_markdown("")
        assert report.title == ""
        assert report.metadata is None
        assert report.preamble == []
        assert report.sections == []
        assert report.toc == []
