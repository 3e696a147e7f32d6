#!/usr/bin/env python3
"""
Project banner generator driven by README metadata.

This tool reads a project's README.md, picks up a title and an optional
tagline from HTML comment annotations, and renders a decorative SVG banner
(plus a PNG when a rasterizer is available) next to the README:

    <!-- banner-title: My Project -->
    <!-- banner-tagline: Does one thing well -->

Generation pipeline:

1. THEME: look up one of the named five-color palettes (light, muted, dark).
2. METADATA: extract title and tagline from the README annotations.
3. TEMPLATE: pick the SVG template for the requested alignment
   (center, left, right) and fill its {{PLACEHOLDER}} tokens with
   XML-escaped values.
4. BADGES: drop every <!--BADGEn_START-->...<!--BADGEn_END--> region whose
   badge text is empty and remove the marker comments around the rest.
5. RASTER: convert the SVG to PNG with rsvg-convert, or cairosvg as a
   fallback. This step is best-effort: when it fails only banner.svg is
   written and a warning is logged.

Usage examples:
    python banner_gen.py ./my-project
    python banner_gen.py ./my-project dark left -b v1.0 -b MIT

License: MIT
"""

from __future__ import annotations

# =============================================================================
# IMPORTS
# =============================================================================

import argparse  # CLI argument parsing
import importlib.util  # Look up the cairosvg library without importing it
import logging  # Structured logging to stderr
import re  # Metadata annotation and placeholder matching
import shutil  # Locate the rsvg-convert executable
import subprocess  # External process execution (rsvg-convert)
import sys  # System exit codes
from dataclasses import dataclass, fields  # Immutable data structures
from pathlib import Path  # Cross-platform path handling
from types import MappingProxyType  # Read-only theme table
from typing import Callable, Final, Mapping, Sequence, TypeAlias

from banner_templates import ALIGNMENTS, TEMPLATES

# =============================================================================
# PUBLIC API EXPORTS
# =============================================================================

__all__ = [
    # Data classes
    "BannerResult",
    "BannerVariables",
    "Metadata",
    "RasterBackend",
    "ThemePalette",
    # Exception classes
    "BannerGeneratorError",
    "MissingTitleError",
    "OutputWriteError",
    "RasterizationError",
    "SourceReadError",
    "TemplateNotFoundError",
    "UnknownThemeError",
    "ValidationError",
    # Core transformations
    "escape_xml",
    "parse_readme_metadata",
    "replace_variables",
    "strip_badge",
    "unwrap_badge",
    # Collaborators and orchestration
    "convert_svg_to_png",
    "generate_banner",
    "generate_svg",
    "get_theme",
    "load_template",
    "read_project_metadata",
    "write_banner_files",
]

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

# Handlers are installed by cli_main(); importing this module only creates the logger
LOG_FORMAT: Final[str] = "%(levelname)s: %(message)s"
logger = logging.getLogger(__name__)

# =============================================================================
# TYPE ALIASES
# =============================================================================

Color: TypeAlias = str  # Hex color string in format "#RRGGBB"
SVGText: TypeAlias = str  # Complete or partially filled SVG document

# =============================================================================
# CONSTANTS
# =============================================================================

# Input file looked up inside the project directory
README_NAME: Final[str] = "README.md"

# Output files, written next to the README
SVG_NAME: Final[str] = "banner.svg"
PNG_NAME: Final[str] = "banner.png"

# CLI defaults when the optional positionals are omitted
DEFAULT_THEME: Final[str] = "light"
DEFAULT_ALIGN: Final[str] = "center"

# Templates carry exactly three badge regions, numbered 1..3
MAX_BADGES: Final[int] = 3

# Subprocess timeout (seconds) for the external rasterizer
RASTER_TIMEOUT: Final[int] = 30

# First eight bytes of every PNG file; backend output is checked against it
PNG_SIGNATURE: Final[bytes] = b"\x89PNG\r\n\x1a\n"

# Annotation patterns: single-line HTML comments such as
#   <!-- banner-title: My Project -->
# Whitespace is allowed after "<!--", after the colon and before "-->",
# but not between the key and the colon. ".+?" does not cross newlines.
TITLE_PATTERN: Final[re.Pattern[str]] = re.compile(r"<!--\s*banner-title:\s*(.+?)\s*-->")
TAGLINE_PATTERN: Final[re.Pattern[str]] = re.compile(r"<!--\s*banner-tagline:\s*(.+?)\s*-->")

# Validation pattern for theme colors (exactly 6 hex digits after #)
HEX_COLOR_PATTERN: Final[re.Pattern[str]] = re.compile(r"^#[0-9a-fA-F]{6}$")

# Whitespace consumed after a stripped region or a removed marker
# (space, tab, carriage return, newline; form feeds and the like stay)
BADGE_TRAILING_WHITESPACE: Final[str] = " \t\r\n"

# Named entities for the five XML special characters
_XML_ENTITIES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&apos;",
    }
)


# =============================================================================
# EXCEPTION CLASSES
# =============================================================================


class BannerGeneratorError(Exception):
    """
    Base exception for all banner generation errors.

    The CLI catches this class and turns it into exit code 1.
    """


class ValidationError(BannerGeneratorError):
    """
    Raised when an argument is outside what the templates support.

    This includes:
    - Malformed theme colors
    - More badges than badge slots
    - Badge slot numbers outside 1..3
    """


class MissingTitleError(BannerGeneratorError):
    """Raised when the README has no usable banner-title annotation."""


class UnknownThemeError(BannerGeneratorError):
    """Raised when a theme name is not in the theme table."""


class TemplateNotFoundError(BannerGeneratorError):
    """Raised when no template exists for the requested alignment."""


class SourceReadError(BannerGeneratorError):
    """Raised when the README cannot be read or decoded."""


class OutputWriteError(BannerGeneratorError):
    """Raised when banner.svg or banner.png cannot be written."""


class RasterizationError(BannerGeneratorError):
    """
    Raised when SVG to PNG conversion fails.

    This is the only non-fatal error: generate_banner() logs it as a
    warning and writes the SVG alone.
    """


# =============================================================================
# DATA CLASSES
# =============================================================================


@dataclass(frozen=True, slots=True)
class Metadata:
    """
    Banner text extracted from a README.

    Attributes:
        name: Project title, never empty
        tagline: Subtitle line, empty string when the README has none
    """

    name: str
    tagline: str = ""


@dataclass(frozen=True, slots=True)
class ThemePalette:
    """
    Immutable five-color palette for one banner theme.

    Attributes:
        bg0: Background gradient start, also used for the tagline
        bg1: Background gradient end
        bg2: Panel background behind the text
        wave0: First accent wave and badge pill color
        wave1: Second accent wave and badge pill color
    """

    bg0: Color
    bg1: Color
    bg2: Color
    wave0: Color
    wave1: Color

    def __post_init__(self) -> None:
        """
        Validate every color on creation.

        Raises:
            ValidationError: If any color is not in #RRGGBB format
        """
        for field in fields(self):
            color = getattr(self, field.name)
            if not HEX_COLOR_PATTERN.match(color):
                msg = f"Invalid hex color for {field.name}: {color!r}. Expected #RRGGBB"
                raise ValidationError(msg)


@dataclass(frozen=True, slots=True)
class BannerVariables:
    """
    Typed record of every value a banner template can receive.

    Field names are checked by the interpreter; the placeholder spelling
    only appears in as_mapping(), at the substitution boundary.
    """

    bg0: str
    bg1: str
    bg2: str
    wave0: str
    wave1: str
    project_name: str
    tagline: str
    badge_1: str = ""
    badge_2: str = ""
    badge_3: str = ""

    @classmethod
    def build(
        cls,
        metadata: Metadata,
        theme: ThemePalette,
        badges: Sequence[str] = (),
    ) -> BannerVariables:
        """
        Combine metadata, theme and badge texts into one record.

        Missing badges become empty strings so their regions get stripped.

        Raises:
            ValidationError: If more than MAX_BADGES badges are given
        """
        if len(badges) > MAX_BADGES:
            msg = f"At most {MAX_BADGES} badges are supported, got {len(badges)}"
            raise ValidationError(msg)

        slots = list(badges) + [""] * (MAX_BADGES - len(badges))
        return cls(
            bg0=theme.bg0,
            bg1=theme.bg1,
            bg2=theme.bg2,
            wave0=theme.wave0,
            wave1=theme.wave1,
            project_name=metadata.name,
            tagline=metadata.tagline,
            badge_1=slots[0],
            badge_2=slots[1],
            badge_3=slots[2],
        )

    @property
    def badges(self) -> tuple[str, str, str]:
        """Return the raw badge texts in slot order (slot 1 first)."""
        return (self.badge_1, self.badge_2, self.badge_3)

    def as_mapping(self) -> dict[str, str]:
        """Return the placeholder-name -> raw value mapping used by templates."""
        return {
            "BG0": self.bg0,
            "BG1": self.bg1,
            "BG2": self.bg2,
            "WAVE0": self.wave0,
            "WAVE1": self.wave1,
            "PROJECT_NAME": self.project_name,
            "TAGLINE": self.tagline,
            "BADGE_1": self.badge_1,
            "BADGE_2": self.badge_2,
            "BADGE_3": self.badge_3,
        }


@dataclass(frozen=True, slots=True)
class RasterBackend:
    """
    One way of turning SVG bytes into PNG bytes.

    Attributes:
        name: Label used in log messages
        is_available: Cheap check, True when the backend can be tried
        render: Conversion function; raises RasterizationError on failure
    """

    name: str
    is_available: Callable[[], bool]
    render: Callable[[bytes], bytes]


@dataclass(frozen=True, slots=True)
class BannerResult:
    """
    Files written by one generate_banner() call.

    Attributes:
        svg_path: Location of banner.svg
        png_path: Location of banner.png, or None when rasterization was skipped
    """

    svg_path: Path
    png_path: Path | None


# =============================================================================
# THEMES
# =============================================================================

# Built once at import and never mutated; pass another mapping to get_theme()
# to use custom palettes
THEMES: Final[Mapping[str, ThemePalette]] = MappingProxyType(
    {
        "light": ThemePalette(
            bg0="#8BCFE6",
            bg1="#F2B5C8",
            bg2="#F8F9FB",
            wave0="#9DD7EC",
            wave1="#F6AFC3",
        ),
        "muted": ThemePalette(
            bg0="#7FC3DD",
            bg1="#EFAEC2",
            bg2="#F3F5F7",
            wave0="#8FCFE3",
            wave1="#F2A7BE",
        ),
        "dark": ThemePalette(
            bg0="#245A74",
            bg1="#7A3651",
            bg2="#0F1720",
            wave0="#3A7C96",
            wave1="#A35A74",
        ),
    }
)


def get_theme(name: str, themes: Mapping[str, ThemePalette] = THEMES) -> ThemePalette:
    """
    Look up a palette by name.

    Args:
        name: Theme name, e.g. "light", "muted" or "dark"
        themes: Palette table to search (default: built-in THEMES)

    Returns:
        The matching ThemePalette

    Raises:
        UnknownThemeError: If the name is not in the table; the message
            lists the valid names
    """
    try:
        return themes[name]
    except KeyError:
        msg = f"unknown theme {name!r}. Use: {', '.join(themes)}"
        raise UnknownThemeError(msg) from None


# =============================================================================
# CORE TRANSFORMATIONS
# =============================================================================


def parse_readme_metadata(content: str) -> Metadata:
    """
    Extract banner title and tagline from README text.

    Both annotations are single-line HTML comments. The first occurrence of
    each key wins, regardless of whether the title or the tagline comes
    first in the document. Values are captured literally and only stripped
    of surrounding whitespace.

    Args:
        content: Full README text

    Returns:
        Metadata with the title and the tagline ("" when absent)

    Raises:
        MissingTitleError: If there is no banner-title annotation or the
            first one is blank

    Example:
        >>> parse_readme_metadata("<!-- banner-title: Demo -->").name
        'Demo'
    """
    title_match = TITLE_PATTERN.search(content)
    if title_match is None:
        raise MissingTitleError(f"no banner-title found in {README_NAME}")

    name = title_match.group(1).strip()
    if not name:
        raise MissingTitleError(f"banner-title in {README_NAME} is empty")

    tagline_match = TAGLINE_PATTERN.search(content)
    tagline = tagline_match.group(1).strip() if tagline_match else ""

    return Metadata(name=name, tagline=tagline)


def escape_xml(text: str) -> str:
    """
    Make arbitrary text safe to embed in SVG content and attribute values.

    The five XML special characters become their named entities and every
    character above 127 becomes a decimal character reference, so the
    output is pure ASCII. Escaping is a single pass: "&amp;" in the input
    becomes "&amp;amp;".

    Example:
        >>> escape_xml("🚀 <Fast & Furious>")
        '&#128640; &lt;Fast &amp; Furious&gt;'
    """
    parts: list[str] = []
    for char in text:
        code = ord(char)
        if code > 127:
            parts.append(f"&#{code};")
        else:
            parts.append(_XML_ENTITIES.get(char, char))
    return "".join(parts)


def replace_variables(template: str, variables: Mapping[str, str]) -> str:
    """
    Fill {{KEY}} placeholders with escaped values.

    Every occurrence of a placeholder is replaced. Keys may be any string,
    including ones with punctuation or the empty key ("{{}}"). Placeholders
    without a mapping entry are left as-is and unused mapping entries are
    ignored. The template is scanned once, so inserted values are never
    substituted again and key order has no effect on the result.

    Args:
        template: Text containing {{KEY}} tokens
        variables: Raw (unescaped) values keyed by placeholder name

    Returns:
        The filled text

    Example:
        >>> replace_variables("{{MY-KEY}} {{NAME}}", {"MY-KEY": "a&b"})
        'a&amp;b {{NAME}}'
    """
    if not variables:
        return template

    escaped = {"{{%s}}" % key: escape_xml(value) for key, value in variables.items()}

    # Longest placeholder first so a placeholder that is a prefix of another
    # never shadows it in the alternation
    placeholders = sorted(escaped, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(placeholder) for placeholder in placeholders))
    return pattern.sub(lambda match: escaped[match.group(0)], template)


def badge_markers(slot: int) -> tuple[str, str]:
    """Return the (start, end) marker comments wrapping a badge slot."""
    if not 1 <= slot <= MAX_BADGES:
        msg = f"Badge slot must be 1-{MAX_BADGES}, got {slot}"
        raise ValidationError(msg)
    return f"<!--BADGE{slot}_START-->", f"<!--BADGE{slot}_END-->"


def strip_badge(svg: SVGText, slot: int) -> SVGText:
    """
    Remove one badge region and the whitespace that follows it.

    Both markers are located by their first occurrence in the whole
    document. The removed span runs from the first character of the start
    marker to the last character of the end marker, then on through any
    spaces, tabs, carriage returns and newlines. Everything before the start
    marker and everything after that whitespace run is joined directly.

    If the start marker is missing, or the end marker appears nowhere in the
    document, the document is returned unchanged.

    An end marker that comes before the start marker is not treated as
    missing: the same before/after join is applied, so the text between the
    two markers ends up on both sides of the cut. Well-formed templates never
    hit this case.

    Args:
        svg: Filled SVG document
        slot: Badge slot number, 1 to 3

    Returns:
        The document without that badge region

    Raises:
        ValidationError: If slot is outside 1..3

    Example:
        >>> strip_badge("a<!--BADGE1_START-->x<!--BADGE1_END-->\\n b", 1)
        'ab'
    """
    start_marker, end_marker = badge_markers(slot)

    start_idx = svg.find(start_marker)
    if start_idx == -1:
        return svg

    # Whole-document search, not just the text after the start marker
    end_idx = svg.find(end_marker)
    if end_idx == -1:
        return svg

    tail_idx = _skip_whitespace(svg, end_idx + len(end_marker))
    return svg[:start_idx] + svg[tail_idx:]


def unwrap_badge(svg: SVGText, slot: int) -> SVGText:
    """
    Remove the marker comments of a filled badge slot, keeping its content.

    Markers are located like strip_badge() does: first occurrence of each,
    anywhere in the document, and a no-op when either one is missing. Each
    marker goes together with the whitespace run that follows it. When the
    end marker comes first, both markers are still removed and all other
    text is kept in place.
    """
    start_marker, end_marker = badge_markers(slot)

    start_idx = svg.find(start_marker)
    if start_idx == -1:
        return svg

    end_idx = svg.find(end_marker)
    if end_idx == -1:
        return svg

    # (begin, end) of each marker plus its trailing whitespace, in document order
    first, second = sorted(
        [
            (start_idx, _skip_whitespace(svg, start_idx + len(start_marker))),
            (end_idx, _skip_whitespace(svg, end_idx + len(end_marker))),
        ]
    )
    return svg[: first[0]] + svg[first[1] : second[0]] + svg[second[1] :]


def _skip_whitespace(svg: str, idx: int) -> int:
    """Return the index of the first non-whitespace character at or after idx."""
    while idx < len(svg) and svg[idx] in BADGE_TRAILING_WHITESPACE:
        idx += 1
    return idx


# =============================================================================
# TEMPLATE RENDERING
# =============================================================================


def load_template(align: str) -> str:
    """
    Return the SVG template for an alignment.

    Raises:
        TemplateNotFoundError: If align is not center, left or right
    """
    try:
        return TEMPLATES[align]
    except KeyError:
        msg = (
            f"failed to load template banner.{align}.svg: "
            f"unsupported alignment {align!r}. Use: {', '.join(ALIGNMENTS)}"
        )
        raise TemplateNotFoundError(msg) from None


def generate_svg(
    metadata: Metadata,
    theme: ThemePalette,
    align: str = DEFAULT_ALIGN,
    badges: Sequence[str] = (),
) -> SVGText:
    """
    Render the complete banner SVG.

    Process:
        1. Load the template for the alignment
        2. Build the typed variable record from metadata, theme and badges
        3. Substitute every placeholder with its escaped value
        4. Strip each badge region whose text is blank, and drop the
           marker comments around the others

    Args:
        metadata: Title and tagline
        theme: Color palette
        align: Template alignment (center, left, right)
        badges: Up to three badge texts, filling slots 1..3 in order

    Returns:
        The finished SVG document

    Raises:
        TemplateNotFoundError: If the alignment has no template
        ValidationError: If more than three badges are given
    """
    template = load_template(align)
    variables = BannerVariables.build(metadata, theme, badges)
    logger.debug("Rendering %s template for %r", align, metadata.name)

    svg = replace_variables(template, variables.as_mapping())

    # Blank check uses the raw value, before escaping
    for slot, badge in enumerate(variables.badges, start=1):
        if badge.strip():
            svg = unwrap_badge(svg, slot)
        else:
            svg = strip_badge(svg, slot)

    return svg


# =============================================================================
# RASTERIZATION
# =============================================================================


def _rsvg_convert_available() -> bool:
    return shutil.which("rsvg-convert") is not None


def _cairosvg_available() -> bool:
    return importlib.util.find_spec("cairosvg") is not None


def _render_with_rsvg_convert(svg_data: bytes) -> bytes:
    """
    Convert SVG to PNG by piping it through the rsvg-convert executable.

    Raises:
        RasterizationError: If rsvg-convert is missing or exits non-zero
        subprocess.TimeoutExpired: If rendering exceeds RASTER_TIMEOUT
    """
    # shell=False (default); SVG goes in on stdin, PNG comes out on stdout
    try:
        result = subprocess.run(
            ["rsvg-convert", "-f", "png"],
            input=svg_data,
            capture_output=True,
            check=True,
            timeout=RASTER_TIMEOUT,
        )
    except FileNotFoundError as e:
        raise RasterizationError("rsvg-convert not found") from e
    except subprocess.CalledProcessError as e:
        stderr = e.stderr.decode("utf-8", errors="replace").strip()
        msg = f"rsvg-convert failed: {e} (stderr: {stderr})"
        raise RasterizationError(msg) from e

    return result.stdout


def _render_with_cairosvg(svg_data: bytes) -> bytes:
    """
    Convert SVG to PNG in-process with cairosvg.

    Importing cairosvg also loads the native cairo library, which raises
    OSError when libcairo is not installed.

    Raises:
        RasterizationError: If cairosvg cannot be loaded or rendering fails
    """
    try:
        import cairosvg
    except (ImportError, OSError) as e:
        raise RasterizationError(f"cairosvg unavailable: {e}") from e

    try:
        return cairosvg.svg2png(bytestring=svg_data)
    except Exception as e:  # cairosvg surfaces XML, value and cairo errors alike
        raise RasterizationError(f"cairosvg rendering failed: {e}") from e


# Tried in order: external tool first, library second
RASTER_BACKENDS: Final[tuple[RasterBackend, ...]] = (
    RasterBackend("rsvg-convert", _rsvg_convert_available, _render_with_rsvg_convert),
    RasterBackend("cairosvg", _cairosvg_available, _render_with_cairosvg),
)


def convert_svg_to_png(
    svg: SVGText,
    backends: Sequence[RasterBackend] | None = None,
) -> bytes:
    """
    Rasterize an SVG document with the first backend that works.

    Backends whose availability check fails are skipped. A backend that raises or
    returns something other than PNG data falls through to the next one.
    A timeout stops the search immediately.

    Args:
        svg: SVG document text
        backends: Backends to try in order (default: RASTER_BACKENDS)

    Returns:
        PNG file contents

    Raises:
        RasterizationError: If no backend is available or all of them fail
    """
    if backends is None:
        backends = RASTER_BACKENDS

    svg_data = svg.encode("utf-8")
    last_error: Exception | None = None

    for backend in backends:
        if not backend.is_available():
            logger.debug("Raster backend %s not available", backend.name)
            continue

        logger.debug("Rasterizing with %s", backend.name)
        try:
            png = backend.render(svg_data)
        except RasterizationError as e:
            last_error = e
            continue
        except subprocess.TimeoutExpired as e:
            msg = f"{backend.name} timed out after {RASTER_TIMEOUT}s"
            raise RasterizationError(msg) from e

        if not png.startswith(PNG_SIGNATURE):
            last_error = RasterizationError(f"{backend.name} did not produce PNG data")
            continue

        return png

    if last_error is None:
        names = ", ".join(backend.name for backend in backends) or "none configured"
        raise RasterizationError(f"no PNG renderer available (tried: {names})")
    raise RasterizationError(f"PNG conversion failed: {last_error}") from last_error


# =============================================================================
# FILE I/O
# =============================================================================


def read_project_metadata(project_dir: Path | str) -> Metadata:
    """
    Read README.md from a project directory and parse its banner metadata.

    Raises:
        SourceReadError: If README.md is missing, unreadable or not UTF-8
        MissingTitleError: If README.md has no banner-title annotation
    """
    readme_path = Path(project_dir) / README_NAME
    try:
        content = readme_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"failed to read {README_NAME} from {project_dir}: {e}"
        raise SourceReadError(msg) from e

    return parse_readme_metadata(content)


def write_banner_files(
    project_dir: Path | str,
    svg: SVGText,
    png: bytes | None,
) -> BannerResult:
    """
    Write banner.svg, and banner.png when PNG data is given.

    The directory must already exist.

    Raises:
        OutputWriteError: If either file cannot be written
    """
    project_dir = Path(project_dir)
    svg_path = project_dir / SVG_NAME
    png_path = project_dir / PNG_NAME

    try:
        # newline="" keeps the document byte-for-byte on every platform
        svg_path.write_text(svg, encoding="utf-8", newline="")
    except OSError as e:
        raise OutputWriteError(f"failed to write SVG: {e}") from e
    logger.info("Generated: %s", svg_path)

    if png is None:
        return BannerResult(svg_path=svg_path, png_path=None)

    try:
        png_path.write_bytes(png)
    except OSError as e:
        raise OutputWriteError(f"failed to write PNG: {e}") from e
    logger.info("Generated: %s", png_path)

    return BannerResult(svg_path=svg_path, png_path=png_path)


# =============================================================================
# ORCHESTRATION
# =============================================================================


def generate_banner(
    project_dir: Path | str,
    theme: str = DEFAULT_THEME,
    align: str = DEFAULT_ALIGN,
    badges: Sequence[str] = (),
    *,
    themes: Mapping[str, ThemePalette] = THEMES,
    rasterize: bool = True,
    converter: Callable[[SVGText], bytes] | None = None,
) -> BannerResult:
    """
    Generate banner.svg (and banner.png) for a project directory.

    Every fatal check runs before anything is written, so a bad theme,
    alignment or README leaves the directory untouched. PNG conversion is
    best-effort: a RasterizationError is logged as a warning and only the
    SVG is written.

    Args:
        project_dir: Directory containing README.md; outputs land here too
        theme: Theme name from the themes table
        align: Template alignment (center, left, right)
        badges: Up to three badge texts
        themes: Palette table (default: built-in THEMES)
        rasterize: Set False to skip PNG output entirely
        converter: SVG to PNG function (default: convert_svg_to_png)

    Returns:
        BannerResult with the written paths

    Raises:
        UnknownThemeError, SourceReadError, MissingTitleError,
        TemplateNotFoundError, ValidationError, OutputWriteError
    """
    palette = get_theme(theme, themes)
    metadata = read_project_metadata(project_dir)
    svg = generate_svg(metadata, palette, align, badges)

    png: bytes | None = None
    if rasterize:
        convert = converter if converter is not None else convert_svg_to_png
        try:
            png = convert(svg)
        except RasterizationError as e:
            logger.warning("%s", e)

    return write_banner_files(project_dir, svg, png)


# =============================================================================
# COMMAND LINE INTERFACE
# =============================================================================


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="banner-gen",
        description="Generate a project banner (SVG + PNG) from README.md annotations.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""\
README annotations:
  <!-- banner-title: My Project -->        (required)
  <!-- banner-tagline: What it does -->     (optional)

Examples:
  %(prog)s ./my-project
  %(prog)s ./my-project dark left
  %(prog)s ./my-project muted right -b v2.1 -b MIT --no-png

Themes: {", ".join(THEMES)}
Alignments: {", ".join(ALIGNMENTS)}
""",
    )

    parser.add_argument(
        "project_dir",
        nargs="?",
        type=Path,
        metavar="PROJECT_DIR",
        help=f"Directory containing {README_NAME}",
    )
    parser.add_argument(
        "theme",
        nargs="?",
        default=DEFAULT_THEME,
        help=f"Theme name (default: {DEFAULT_THEME})",
    )
    parser.add_argument(
        "align",
        nargs="?",
        default=DEFAULT_ALIGN,
        help=f"Text alignment (default: {DEFAULT_ALIGN})",
    )
    parser.add_argument(
        "-b",
        "--badge",
        action="append",
        default=[],
        metavar="TEXT",
        help=f"Badge text, repeat up to {MAX_BADGES} times",
    )
    parser.add_argument(
        "--no-png",
        action="store_true",
        help="Write banner.svg only",
    )
    parser.add_argument(
        "--list-themes",
        action="store_true",
        help="List available themes and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def cli_main(argv: Sequence[str] | None = None) -> int:
    """
    Command-line interface entry point.

    Exit Codes:
        0   - Success (banner written)
        1   - Error (missing title, unknown theme, bad alignment, I/O failure)
        2   - Usage error (reported by argparse)
        130 - Interrupted (Ctrl+C)
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, stream=sys.stderr)
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    if args.list_themes:
        for name in THEMES:
            print(f"  {name}")
        return 0

    if args.project_dir is None:
        parser.error("the following arguments are required: PROJECT_DIR")

    try:
        generate_banner(
            args.project_dir,
            args.theme,
            args.align,
            args.badge,
            rasterize=not args.no_png,
        )
        return 0
    except BannerGeneratorError as e:
        logger.error("Error: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130


# =============================================================================
# SCRIPT ENTRY POINT
# =============================================================================

if __name__ == "__main__":
    sys.exit(cli_main())
