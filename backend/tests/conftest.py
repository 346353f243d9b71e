"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svgjsx.models.options import CleaningOptions

# Sample icons

CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

SMILEY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
  <circle cx="8" cy="9" r="1"/>
  <circle cx="16" cy="9" r="1"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
</svg>'''

HOME_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <path d="M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"/>
  <path d="M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"/>
</svg>'''

BAR_CHART_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <line x1="18" x2="18" y1="20" y2="10"/>
  <line x1="12" x2="12" y1="20" y2="4"/>
  <line x1="6" x2="6" y1="20" y2="14"/>
</svg>'''

# Exported from a design tool: declaration, doctype, comments, editor metadata,
# gradients (one unused), inline styles, rgb() colors, long decimals.
EXPORTED_SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">
<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape" width="48.00000" height="48" viewBox="0 0 48 48">
  <!-- Generator: hand -->
  <defs>
    <linearGradient id="used"><stop offset="0" stop-color="rgb(255, 0, 0)"/></linearGradient>
    <linearGradient id="unused"><stop offset="1" stop-color="#000"/></linearGradient>
  </defs>
  <style>   </style>
  <g inkscape:label="Layer 1" data-name="layer">
    <rect x="1.23456" y="2" width="10" height="10" fill="url(#used)"/>
    <rect x="1.23456" y="2" width="10" height="10" fill="url(#used)"/>
    <path d="M 1 2   L 3 4 L 5 6" fill="rgb(0, 128, 255)" style="opacity: 0.5"/>
  </g>
</svg>'''


def only(**flags: bool) -> CleaningOptions:
    """CleaningOptions with every pass off except ``flags``."""
    return CleaningOptions.none().model_copy(update=flags)


@pytest.fixture
def circle_svg() -> str:
    return CIRCLE_SVG


@pytest.fixture
def smiley_svg() -> str:
    return SMILEY_SVG


@pytest.fixture
def exported_svg() -> str:
    return EXPORTED_SVG
