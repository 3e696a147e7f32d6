"""
README Metadata Tests
=====================
Extraction of banner-title / banner-tagline annotations, from text and
from a project directory.
"""

import pytest

from banner_gen import (
    Metadata,
    MissingTitleError,
    SourceReadError,
    parse_readme_metadata,
    read_project_metadata,
)


class TestParseReadmeMetadata:

    @pytest.mark.parametrize(
        "content, expected",
        [
            pytest.param(
                "# My Project\n"
                "<!-- banner-title: Test Project -->\n"
                "<!-- banner-tagline: A test project for testing -->\n"
                "Some content",
                Metadata("Test Project", "A test project for testing"),
                id="title-and-tagline",
            ),
            pytest.param(
                "<!-- banner-title: Solo Project -->\nMore content here",
                Metadata("Solo Project", ""),
                id="title-only",
            ),
            pytest.param(
                "<!-- banner-title: 🚀 Banner Kit -->\n"
                "<!-- banner-tagline: SVG/PNG banner generator -->",
                Metadata("🚀 Banner Kit", "SVG/PNG banner generator"),
                id="emoji-and-slash",
            ),
            pytest.param(
                "<!--   banner-title:   Extra Spaces   -->\n"
                "<!--   banner-tagline:   Spaced Out   -->",
                Metadata("Extra Spaces", "Spaced Out"),
                id="extra-whitespace",
            ),
            pytest.param(
                "<!--banner-title:Tight-->\n<!--banner-tagline:Packed-->",
                Metadata("Tight", "Packed"),
                id="no-whitespace",
            ),
            pytest.param(
                "<!-- banner-tagline: Tagline First -->\n"
                "<!-- banner-title: Title Second -->",
                Metadata("Title Second", "Tagline First"),
                id="reverse-order",
            ),
            pytest.param(
                "<!-- banner-title: First Title -->\n"
                "<!-- banner-title: Second Title -->\n"
                "<!-- banner-tagline: The Tagline -->\n"
                "<!-- banner-tagline: Other Tagline -->",
                Metadata("First Title", "The Tagline"),
                id="first-occurrence-wins",
            ),
            pytest.param(
                '<!-- banner-title: <Test> & "Project" -->',
                Metadata('<Test> & "Project"', ""),
                id="raw-special-characters",
            ),
        ],
    )
    def test_extracts_metadata(self, content, expected):
        assert parse_readme_metadata(content) == expected

    def test_keys_are_case_sensitive(self):
        with pytest.raises(MissingTitleError):
            parse_readme_metadata("<!-- Banner-Title: Shouty -->")

    def test_no_whitespace_between_key_and_colon(self):
        with pytest.raises(MissingTitleError):
            parse_readme_metadata("<!-- banner-title : Spaced -->")

        assert parse_readme_metadata("<!--banner-title:Tight-->") == Metadata(name="Tight")

    @pytest.mark.parametrize(
        "content",
        [
            "<!-- banner-tagline: Only Tagline -->",
            "",
            "# Project without banner metadata",
        ],
    )
    def test_missing_title(self, content):
        with pytest.raises(MissingTitleError, match="no banner-title found"):
            parse_readme_metadata(content)

    def test_blank_title_is_missing(self):
        with pytest.raises(MissingTitleError, match="empty"):
            parse_readme_metadata("<!-- banner-title:    -->")

    def test_annotation_must_be_on_one_line(self):
        with pytest.raises(MissingTitleError):
            parse_readme_metadata("<!-- banner-title:\n-->")


class TestReadProjectMetadata:

    def test_reads_readme(self, make_project):
        project_dir = make_project(
            """\
            <!-- banner-title: Test Project -->
            <!-- banner-tagline: Testing metadata reading -->
            # Test Project
            """
        )

        metadata = read_project_metadata(project_dir)

        assert metadata == Metadata("Test Project", "Testing metadata reading")

    def test_accepts_string_path(self, make_project):
        project_dir = make_project("<!-- banner-title: Str Path -->\n")

        assert read_project_metadata(str(project_dir)).name == "Str Path"

    def test_missing_readme(self, tmp_path):
        with pytest.raises(SourceReadError, match="failed to read README.md"):
            read_project_metadata(tmp_path / "nonexistent")

    def test_undecodable_readme(self, tmp_path):
        (tmp_path / "README.md").write_bytes(b"\xff\xfe\xfa not utf-8")

        with pytest.raises(SourceReadError):
            read_project_metadata(tmp_path)

    def test_readme_without_title(self, make_project):
        project_dir = make_project("# Project without banner metadata\n")

        with pytest.raises(MissingTitleError, match="no banner-title found"):
            read_project_metadata(project_dir)
