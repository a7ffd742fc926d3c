from resumark.parser.base import Blank, Heading, ListItem, Paragraph, RawPassthrough
from resumark.parser.block_classifier import classify, classify_line


def test_heading_levels() -> None:
    assert classify_line("# Title") == Heading(level=1, text="Title")
    assert classify_line("## Sub") == Heading(level=2, text="Sub")
    assert classify_line("### Sub2") == Heading(level=3, text="Sub2")


def test_heading_prefix_without_text_is_still_heading() -> None:
    assert classify_line("# ") == Heading(level=1, text="")


def test_hash_without_space_is_paragraph() -> None:
    assert classify_line("#hashtag") == Paragraph(text="#hashtag")
    assert classify_line("#### Deep") == Paragraph(text="#### Deep")


def test_list_item() -> None:
    assert classify_line("- Python") == ListItem(text="Python")
    assert classify_line("-") == Paragraph(text="-")
    assert classify_line("-5 degrees") == Paragraph(text="-5 degrees")


def test_passthrough_keeps_line_verbatim() -> None:
    assert classify_line("<div>x</div>") == RawPassthrough(content="<div>x</div>")
    assert classify_line("   <br/>") == RawPassthrough(content="   <br/>")


def test_heading_beats_passthrough() -> None:
    assert classify_line("# <b>Name</b>") == Heading(level=1, text="<b>Name</b>")


def test_blank_lines() -> None:
    assert classify_line("") == Blank()
    assert classify_line("   \t") == Blank()


def test_paragraph_keeps_original_line() -> None:
    assert classify_line("  indented text") == Paragraph(text="  indented text")


def test_classify_preserves_order_and_line_count() -> None:
    text = "# Jane Doe\n\n## Skills\n- Python\n- SQL\nplain\n<hr>"
    blocks = classify(text)

    assert len(blocks) == 7
    assert [type(b) for b in blocks] == [
        Heading,
        Blank,
        Heading,
        ListItem,
        ListItem,
        Paragraph,
        RawPassthrough,
    ]


def test_crlf_input_classifies_like_lf() -> None:
    assert classify("# Name\r\n- item\r\n") == classify("# Name\n- item\n")


def test_empty_input_is_single_blank() -> None:
    assert classify("") == [Blank()]
