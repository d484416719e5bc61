from pill_identifier.models.blocks import ListBlock, ParagraphBlock
from pill_identifier.models.content import EmptyText, MultipleText, SingleText
from pill_identifier.text.segmenter import clean_text, format_content, segment


def test_blank_input_yields_no_blocks():
    assert segment("") == []
    assert segment("   ") == []
    assert segment("\n\n \r\n") == []


def test_single_line_is_a_paragraph_even_with_marker():
    blocks = segment("1. Take with food")
    assert blocks == [ParagraphBlock(text="1. Take with food")]


def test_wrapped_lines_join_into_one_paragraph():
    blocks = segment("Relieves minor aches\nand pains due to\nheadache")
    assert blocks == [ParagraphBlock(text="Relieves minor aches and pains due to headache")]


def test_numeric_citations_are_stripped_but_dosage_parentheses_kept():
    (effective,) = segment("Effective (2.1) immediately")
    assert "(2.1)" not in effective.text
    assert effective.text.startswith("Effective")
    assert effective.text.endswith("immediately")

    (dosage,) = segment("Take (1 tablet) daily")
    assert dosage.text == "Take (1 tablet) daily"


def test_bracket_citations_are_stripped():
    (block,) = segment("Relieves pain [2.1] and fever [5]")
    assert "[" not in block.text
    assert "Relieves pain" in block.text


def test_list_continuation_lines_join_previous_item():
    blocks = segment("1. First item\nmore detail\n2. Second item")
    assert blocks == [ListBlock(items=["First item more detail", "Second item"])]


def test_half_marked_block_counts_as_list():
    blocks = segment("- dizziness\nwhen standing up")
    assert blocks == [ListBlock(items=["dizziness when standing up"])]


def test_below_half_marked_block_is_paragraph():
    blocks = segment("a. starts like a list\nbut this line\nand this line do not")
    assert len(blocks) == 1
    assert isinstance(blocks[0], ParagraphBlock)


def test_orphan_line_before_first_marker_becomes_item():
    blocks = segment("Ask a doctor if you have\n• liver disease\n• kidney disease")
    assert blocks == [
        ListBlock(items=["Ask a doctor if you have", "liver disease", "kidney disease"])
    ]


def test_mixed_markers_and_letters():
    blocks = segment("a) nausea\nb) vomiting\n* rash\n3) itching")
    assert blocks == [ListBlock(items=["nausea", "vomiting", "rash", "itching"])]


def test_blocks_keep_source_order():
    text = "Intro paragraph.\n\n\n- one\n- two\n\nClosing words\nwrapped."
    blocks = segment(text)
    assert blocks == [
        ParagraphBlock(text="Intro paragraph."),
        ListBlock(items=["one", "two"]),
        ParagraphBlock(text="Closing words wrapped."),
    ]


def test_leading_section_title_is_removed_once():
    text = "2 DOSAGE AND ADMINISTRATION\nTake 1 tablet every 4 hours.\n\n3 STORAGE\nKeep dry."
    blocks = segment(text)
    assert blocks[0] == ParagraphBlock(text="Take 1 tablet every 4 hours.")
    assert blocks[1] == ParagraphBlock(text="3 STORAGE Keep dry.")


def test_title_pattern_only_applies_at_very_start():
    assert clean_text("Directions\n1 INDICATIONS") == "Directions\n1 INDICATIONS"


def test_line_starting_with_a_number_and_sentence_is_not_a_title():
    (block,) = segment("1 tablet every 4 hours.")
    assert block.text == "1 tablet every 4 hours."


def test_windows_line_endings_are_normalized():
    blocks = segment("- one\r\n- two\r\n\r\nDone.")
    assert blocks == [ListBlock(items=["one", "two"]), ParagraphBlock(text="Done.")]


def test_format_content_variants():
    assert format_content(EmptyText()) == []
    assert format_content(SingleText(text="  ")) == []
    assert format_content(MultipleText(items=("", " "))) == []
    blocks = format_content(MultipleText(items=("First paragraph.", "- a\n- b")))
    assert blocks == [ParagraphBlock(text="First paragraph."), ListBlock(items=["a", "b"])]
