"""
SVG banner templates, one per text alignment.

Each template is a complete SVG document (1280x320) using these placeholders:

    {{BG0}} {{BG1}}       background gradient stops
    {{BG2}}               panel background
    {{WAVE0}} {{WAVE1}}   accent waves and badge pills
    {{PROJECT_NAME}}      title line
    {{TAGLINE}}           subtitle line
    {{BADGE_1}}..{{BADGE_3}}

Badge N is wrapped in <!--BADGEN_START--> ... <!--BADGEN_END--> so the
generator can drop it when the slot is empty.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

__all__ = ["ALIGNMENTS", "TEMPLATES"]

_CENTER: Final[str] = """\
<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 1280 320" width="1280" height="320">
  <defs>
    <linearGradient id="bannerBackground" x1="0%" y1="0%" x2="100%" y2="100%">
      <stop offset="0%" stop-color="{{BG0}}"/>
      <stop offset="100%" stop-color="{{BG1}}"/>
    </linearGradient>
    <linearGradient id="bannerTitle" x1="0%" y1="0%" x2="100%" y2="0%">
      <stop offset="0%" stop-color="{{BG0}}"/>
      <stop offset="100%" stop-color="{{BG1}}"/>
    </linearGradient>
  </defs>
  <rect width="1280" height="320" fill="url(#bannerBackground)"/>
  <path d="M0,250 C240,210 420,290 640,250 C860,210 1040,290 1280,250 L1280,320 L0,320 Z" fill="{{WAVE0}}" fill-opacity="0.55"/>
  <path d="M0,275 C220,300 440,240 640,270 C840,300 1060,245 1280,272 L1280,320 L0,320 Z" fill="{{WAVE1}}" fill-opacity="0.55"/>
  <rect x="160" y="40" width="960" height="200" rx="24" fill="{{BG2}}" fill-opacity="0.92"/>
  <text x="640" y="135" text-anchor="middle" font-family="Inter, Segoe UI, Helvetica, Arial, sans-serif" font-size="64" font-weight="700" fill="url(#bannerTitle)">{{PROJECT_NAME}}</text>
  <text x="640" y="180" text-anchor="middle" font-family="Inter, Segoe UI, Helvetica, Arial, sans-serif" font-size="26" fill="{{BG0}}" fill-opacity="0.9">{{TAGLINE}}</text>
  <!--BADGE1_START-->
  <g>
    <rect x="400" y="200" width="150" height="28" rx="14" fill="{{WAVE0}}"/>
    <text x="475" y="219" text-anchor="middle" font-family="Inter, Segoe UI, Helvetica, Arial, sans-serif" font-size="14" fill="{{BG2}}">{{BADGE_1}}</text>
  </g>
  <!--BADGE1_END-->
  <!--BADGE2_START-->
  <g>
    <rect x="565" y="200" width="150" height="28" rx="14" fill="{{WAVE1}}"/>
    <text x="640" y="219" text-anchor="middle" font-family="Inter, Segoe UI, Helvetica, Arial, sans-serif" font-size="14" fill="{{BG2}}">{{BADGE_2}}</text>
  </g>
  <!--BADGE2_END-->
  <!--BADGE3_START-->
  <g>
    <rect x="730" y="200" width="150" height="28" rx="14" fill="{{WAVE0}}"/>
    <text x="805" y="219" text-anchor="middle" font-family="Inter, Segoe UI, Helvetica, Arial, sans-serif" font-size="14" fill="{{BG2}}">{{BADGE_3}}</text>
  </g>
  <!--BADGE3_END-->
</svg>
"""

_LEFT: Final[str] = """\
<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 1280 320" width="1280" height="320">
  <defs>
    <linearGradient id="bannerBackground" x1="0%" y1="0%" x2="100%" y2="100%">
      <stop offset="0%" stop-color="{{BG0}}"/>
      <stop offset="100%" stop-color="{{BG1}}"/>
    </linearGradient>
    <linearGradient id="bannerTitle" x1="0%" y1="0%" x2="100%" y2="0%">
      <stop offset="0%" stop-color="{{BG0}}"/>
      <stop offset="100%" stop-color="{{BG1}}"/>
    </linearGradient>
  </defs>
  <rect width="1280" height="320" fill="url(#bannerBackground)"/>
  <path d="M0,240 C260,200 520,300 800,250 C1000,215 1140,260 1280,240 L1280,320 L0,320 Z" fill="{{WAVE0}}" fill-opacity="0.55"/>
  <path d="M0,280 C300,250 560,310 860,275 C1040,255 1180,290 1280,280 L1280,320 L0,320 Z" fill="{{WAVE1}}" fill-opacity="0.55"/>
  <rect x="60" y="40" width="900" height="200" rx="24" fill="{{BG2}}" fill-opacity="0.92"/>
  <text x="100" y="135" text-anchor="start" font-family="Inter, Segoe UI, Helvetica, Arial, sans-serif" font-size="64" font-weight="700" fill="url(#bannerTitle)">{{PROJECT_NAME}}</text>
  <text x="100" y="180" text-anchor="start" font-family="Inter, Segoe UI, Helvetica, Arial, sans-serif" font-size="26" fill="{{BG0}}" fill-opacity="0.9">{{TAGLINE}}</text>
  <!--BADGE1_START-->
  <g>
    <rect x="100" y="200" width="150" height="28" rx="14" fill="{{WAVE0}}"/>
    <text x="175" y="219" text-anchor="middle" font-family="Inter, Segoe UI, Helvetica, Arial, sans-serif" font-size="14" fill="{{BG2}}">{{BADGE_1}}</text>
  </g>
  <!--BADGE1_END-->
  <!--BADGE2_START-->
  <g>
    <rect x="265" y="200" width="150" height="28" rx="14" fill="{{WAVE1}}"/>
    <text x="340" y="219" text-anchor="middle" font-family="Inter, Segoe UI, Helvetica, Arial, sans-serif" font-size="14" fill="{{BG2}}">{{BADGE_2}}</text>
  </g>
  <!--BADGE2_END-->
  <!--BADGE3_START-->
  <g>
    <rect x="430" y="200" width="150" height="28" rx="14" fill="{{WAVE0}}"/>
    <text x="505" y="219" text-anchor="middle" font-family="Inter, Segoe UI, Helvetica, Arial, sans-serif" font-size="14" fill="{{BG2}}">{{BADGE_3}}</text>
  </g>
  <!--BADGE3_END-->
</svg>
"""

_RIGHT: Final[str] = """\
<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 1280 320" width="1280" height="320">
  <defs>
    <linearGradient id="bannerBackground" x1="100%" y1="0%" x2="0%" y2="100%">
      <stop offset="0%" stop-color="{{BG0}}"/>
      <stop offset="100%" stop-color="{{BG1}}"/>
    </linearGradient>
    <linearGradient id="bannerTitle" x1="100%" y1="0%" x2="0%" y2="0%">
      <stop offset="0%" stop-color="{{BG0}}"/>
      <stop offset="100%" stop-color="{{BG1}}"/>
    </linearGradient>
  </defs>
  <rect width="1280" height="320" fill="url(#bannerBackground)"/>
  <path d="M0,240 C140,260 280,215 480,250 C760,300 1020,200 1280,240 L1280,320 L0,320 Z" fill="{{WAVE0}}" fill-opacity="0.55"/>
  <path d="M0,280 C100,290 240,255 420,275 C720,310 980,250 1280,280 L1280,320 L0,320 Z" fill="{{WAVE1}}" fill-opacity="0.55"/>
  <rect x="320" y="40" width="900" height="200" rx="24" fill="{{BG2}}" fill-opacity="0.92"/>
  <text x="1180" y="135" text-anchor="end" font-family="Inter, Segoe UI, Helvetica, Arial, sans-serif" font-size="64" font-weight="700" fill="url(#bannerTitle)">{{PROJECT_NAME}}</text>
  <text x="1180" y="180" text-anchor="end" font-family="Inter, Segoe UI, Helvetica, Arial, sans-serif" font-size="26" fill="{{BG0}}" fill-opacity="0.9">{{TAGLINE}}</text>
  <!--BADGE1_START-->
  <g>
    <rect x="700" y="200" width="150" height="28" rx="14" fill="{{WAVE0}}"/>
    <text x="775" y="219" text-anchor="middle" font-family="Inter, Segoe UI, Helvetica, Arial, sans-serif" font-size="14" fill="{{BG2}}">{{BADGE_1}}</text>
  </g>
  <!--BADGE1_END-->
  <!--BADGE2_START-->
  <g>
    <rect x="865" y="200" width="150" height="28" rx="14" fill="{{WAVE1}}"/>
    <text x="940" y="219" text-anchor="middle" font-family="Inter, Segoe UI, Helvetica, Arial, sans-serif" font-size="14" fill="{{BG2}}">{{BADGE_2}}</text>
  </g>
  <!--BADGE2_END-->
  <!--BADGE3_START-->
  <g>
    <rect x="1030" y="200" width="150" height="28" rx="14" fill="{{WAVE0}}"/>
    <text x="1105" y="219" text-anchor="middle" font-family="Inter, Segoe UI, Helvetica, Arial, sans-serif" font-size="14" fill="{{BG2}}">{{BADGE_3}}</text>
  </g>
  <!--BADGE3_END-->
</svg>
"""

# Keyed by the alignment name accepted on the command line
TEMPLATES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "center": _CENTER,
        "left": _LEFT,
        "right": _RIGHT,
    }
)

ALIGNMENTS: Final[tuple[str, ...]] = tuple(TEMPLATES)
