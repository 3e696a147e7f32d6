"""
CLI Tests
=========
Argument handling and exit codes of cli_main().
"""

import pytest

import banner_gen
from banner_gen import cli_main

README = """\
<!-- banner-title: CLI Project -->
<!-- banner-tagline: Driven from the command line -->
"""


@pytest.fixture(autouse=True)
def no_real_rasterizer(monkeypatch, fake_png_converter):
    """Route the default converter to a fake so runs do not depend on the host."""
    backend = banner_gen.RasterBackend(
        "fake", lambda: True, lambda svg_data: fake_png_converter("")
    )
    monkeypatch.setattr(banner_gen, "RASTER_BACKENDS", (backend,))


def test_defaults_write_svg_and_png(make_project):
    project_dir = make_project(README)

    assert cli_main([str(project_dir)]) == 0

    svg = (project_dir / "banner.svg").read_text(encoding="utf-8")
    assert "CLI Project" in svg
    assert banner_gen.get_theme("light").bg0 in svg
    assert (project_dir / "banner.png").exists()


def test_theme_align_and_badges(make_project):
    project_dir = make_project(README)

    code = cli_main([str(project_dir), "dark", "right", "-b", "v2.1", "--badge", "MIT"])

    assert code == 0
    svg = (project_dir / "banner.svg").read_text(encoding="utf-8")
    assert banner_gen.get_theme("dark").bg0 in svg
    assert 'text-anchor="end"' in svg
    assert "v2.1" in svg
    assert "MIT" in svg


def test_no_png(make_project):
    project_dir = make_project(README)

    assert cli_main([str(project_dir), "--no-png"]) == 0

    assert (project_dir / "banner.svg").exists()
    assert not (project_dir / "banner.png").exists()


def test_rasterizer_unavailable_still_succeeds(make_project, monkeypatch, caplog):
    monkeypatch.setattr(banner_gen, "RASTER_BACKENDS", ())
    project_dir = make_project(README)

    assert cli_main([str(project_dir)]) == 0

    assert (project_dir / "banner.svg").exists()
    assert not (project_dir / "banner.png").exists()
    assert "no PNG renderer available" in caplog.text


@pytest.mark.parametrize(
    "args, message",
    [
        (["neon"], "unknown theme 'neon'. Use: light, muted, dark"),
        (["light", "diagonal"], "failed to load template"),
        (["light", "center", "-b", "a", "-b", "b", "-b", "c", "-b", "d"], "At most 3 badges"),
    ],
)
def test_fatal_errors_exit_one(make_project, caplog, args, message):
    project_dir = make_project(README)

    assert cli_main([str(project_dir), *args]) == 1

    assert message in caplog.text
    assert not (project_dir / "banner.svg").exists()


def test_missing_title_exits_one(make_project, caplog):
    project_dir = make_project("# Nothing to see\n")

    assert cli_main([str(project_dir)]) == 1
    assert "no banner-title found" in caplog.text


def test_missing_readme_exits_one(tmp_path, caplog):
    assert cli_main([str(tmp_path / "absent")]) == 1
    assert "failed to read README.md" in caplog.text


def test_list_themes(capsys):
    assert cli_main(["--list-themes"]) == 0

    out = capsys.readouterr().out
    assert out.split() == ["light", "muted", "dark"]


def test_project_dir_required(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli_main([])

    assert excinfo.value.code == 2
    assert "PROJECT_DIR" in capsys.readouterr().err


def test_keyboard_interrupt(make_project, monkeypatch):
    def interrupted(*args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(banner_gen, "generate_banner", interrupted)

    assert cli_main([str(make_project(README))]) == 130
