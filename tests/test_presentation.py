from pill_identifier.models.blocks import ListBlock, ParagraphBlock
from pill_identifier.models.content import DataSource, MedicineContent
from pill_identifier.presentation import render_card, render_text


def test_card_sections_follow_fixed_order_and_skip_blanks():
    content = MedicineContent(
        name="Advil",
        source=DataSource.REGULATORY,
        purpose="Pain reliever",
        storage="   ",
        warnings=["Allergy alert", "Stomach bleeding warning"],
    )
    card = render_card(content)
    assert [section.key for section in card.sections] == ["purpose", "warnings"]
    assert card.source_label == "Data sourced from openFDA"
    assert card.summary is None
    assert card.sections[1].blocks == [
        ParagraphBlock(text="Allergy alert"),
        ParagraphBlock(text="Stomach bleeding warning"),
    ]


def test_structured_side_effects_include_chart(generative_content):
    card = render_card(generative_content)
    side_effects = next(s for s in card.sections if s.key == "commonSideEffects")
    assert side_effects.title == "Common Side Effects"
    assert side_effects.blocks == [ParagraphBlock(text="Usually well tolerated.")]
    assert side_effects.chart_title == "Most Common Side Effects Visualization"
    assert [entry.name for entry in side_effects.chart] == ["Nausea", "Rash"]
    assert card.source_label == "Data sourced from an AI knowledge base"


def test_labels_follow_requested_language(generative_content):
    card = render_card(generative_content, "es")
    assert card.sections[0].title == "Ingrediente(s) Activo(s)"
    assert card.language == "en"


def test_list_text_renders_as_list():
    content = MedicineContent(
        name="Tylenol",
        source=DataSource.REGULATORY,
        how_to_take="Directions\n- take 2 caplets\n- do not exceed 6 caplets",
    )
    section = render_card(content).sections[0]
    assert section.blocks == [ListBlock(items=["Directions", "take 2 caplets", "do not exceed 6 caplets"])]


def test_render_text(generative_content):
    text = render_text(render_card(generative_content))
    assert text.startswith("Dolo 650\n[Data sourced from an AI knowledge base]\n")
    assert "COMMON SIDE EFFECTS" in text
    assert "  Nausea: ~2% (Uncommon)" in text
    assert "  Rash: ~0.5% (Rare)" in text
    assert text.endswith("professional for any medical questions.\n")
