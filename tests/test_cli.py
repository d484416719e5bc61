import pytest

from conftest import FakeFallback, FakeIdentifier, FakeRegulatory, FakeSummarizer, FakeTranslation
from pill_identifier import cli
from pill_identifier.errors import TranslationFailure
from pill_identifier.pipeline.identify import MedicinePipeline
from pill_identifier.pipeline.reconciler import SourceReconciler


@pytest.fixture
def run_cli(monkeypatch, fallback_content):
    def runner(argv, translation=None):
        reconciler = SourceReconciler(
            regulatory=FakeRegulatory(),
            summarizer=FakeSummarizer(),
            fallback=FakeFallback(fallback_content),
        )
        pipeline = MedicinePipeline(FakeIdentifier(name="Dolo 650"), reconciler)
        monkeypatch.setattr(MedicinePipeline, "from_settings", classmethod(lambda cls: pipeline))
        monkeypatch.setattr(cli, "TextTranslator", lambda: translation or FakeTranslation())
        return cli.main(argv)

    return runner


def test_lookup_by_name_in_native_language(run_cli, capsys):
    assert run_cli(["--name", "Dolo 650"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Dolo 650\n[Data sourced from an AI knowledge base]\n")
    assert "ACTIVE INGREDIENT(S)" in out


def test_lookup_translates_card(run_cli, capsys):
    assert run_cli(["--name", "Dolo 650", "--language", "es"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("[es] Dolo 650\n[Datos de una base de conocimientos de IA]\n")
    assert "INGREDIENTE(S) ACTIVO(S)" in out
    assert "[es] Paracetamol 650 mg" in out


def test_failed_translation_prints_original_card(run_cli, capsys):
    translation = FakeTranslation(error=TranslationFailure("service unavailable"))
    assert run_cli(["--name", "Dolo 650", "--language", "es"], translation) == 0
    out = capsys.readouterr().out
    assert out.startswith("Dolo 650\n")
    assert "Paracetamol 650 mg" in out
    assert "[es]" not in out


def test_missing_image_exits_with_usage_error(run_cli, tmp_path):
    assert run_cli([str(tmp_path / "missing.jpg")]) == 2
