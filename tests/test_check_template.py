import importlib.util
from pathlib import Path

from tests.conftest import TEMPLATE

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "check_template.py"


def load_script():
    spec = importlib.util.spec_from_file_location("check_template", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_complete_template_passes(capsys):
    assert load_script().main([]) == 0
    assert "All 11 tags present" in capsys.readouterr().out


def test_drifted_template_fails(tmp_path, capsys):
    path = tmp_path / "article.html"
    path.write_text(TEMPLATE.replace('<meta name="author" content="The Limelight" />', ""), encoding="utf-8")

    assert load_script().main([str(path)]) == 1
    out = capsys.readouterr().out
    assert "- author" in out
    assert "+ og:title" in out


def test_unreadable_template(tmp_path, capsys):
    assert load_script().main([str(tmp_path / "nope.html")]) == 2
    assert "[err]" in capsys.readouterr().out
