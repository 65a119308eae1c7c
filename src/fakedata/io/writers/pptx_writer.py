"""PowerPoint writer built on python-pptx.

Uses the default template: layout 0 for title slides and layout 1 (title and
content) for bullet slides.
"""

from __future__ import annotations

import os

from pptx import Presentation

from ...generators.outline import DeckOutline, Slide

TITLE_LAYOUT = 0
CONTENT_LAYOUT = 1


def _fill_content(slide, spec: Slide) -> None:
    body = slide.placeholders[1].text_frame
    for i, bullet in enumerate(spec.bullets):
        para = body.paragraphs[0] if i == 0 else body.add_paragraph()
        para.text = bullet.text
        para.level = bullet.level


def write_pptx(path: str | os.PathLike[str], outline: DeckOutline) -> None:
    """Render ``outline`` as a ``.pptx`` file at ``path``."""

    prs = Presentation()
    prs.core_properties.title = outline.title

    for spec in outline.slides:
        if spec.kind == "title":
            slide = prs.slides.add_slide(prs.slide_layouts[TITLE_LAYOUT])
            slide.shapes.title.text = spec.title
            if spec.subtitle:
                slide.placeholders[1].text = spec.subtitle
        else:
            slide = prs.slides.add_slide(prs.slide_layouts[CONTENT_LAYOUT])
            slide.shapes.title.text = spec.title
            _fill_content(slide, spec)

    prs.save(os.fspath(path))


__all__ = ["write_pptx"]
