from __future__ import annotations

from rich.style import Style
from rich.text import Text

from smarttext.parsing.models import AnnotatedSegment, Segment, StyleType, TextInteractions

from .actions import Affordance, affordances

AFFORDANCE_GLYPHS: dict[Affordance, str] = {
    Affordance.COPY: "⧉",
    Affordance.SHARE: "⇪",
    Affordance.PROFILE: "@",
}

_DIM = Style(dim=True)


def _icon(interactions: TextInteractions, affordance: Affordance) -> Text:
    custom = {
        Affordance.COPY: interactions.copy_icon,
        Affordance.SHARE: interactions.share_icon,
        Affordance.PROFILE: interactions.social_icon,
    }[affordance]
    if isinstance(custom, Text):
        return custom
    if isinstance(custom, str):
        return Text(custom)
    return Text(AFFORDANCE_GLYPHS[affordance], style=_DIM)


def affordance_text(segment: AnnotatedSegment) -> Text:
    """Icons for the enabled affordances, space separated."""
    output = Text()
    interactions = segment.interactions
    if interactions is None or not interactions.show_icons:
        return output
    for i, affordance in enumerate(affordances(segment)):
        if i:
            output.append(" ")
        output.append_text(_icon(interactions, affordance))
    return output


def widget_text(segment: AnnotatedSegment, style: StyleType = "") -> Text:
    """Output of the descriptor's ``render_widget`` as ``Text``."""
    render_widget = segment.descriptor.render_widget
    if render_widget is None:
        return Text(segment.text, style=style or "")
    rendered = render_widget(text=segment.raw_text, pattern=segment.pattern)
    if isinstance(rendered, Text):
        return rendered
    return Text(str(rendered), style=style or "")


def to_rich_text(
    segments: list[Segment],
    default_style: StyleType = None,
    show_affordances: bool = True,
) -> Text:
    """Lay segments out as a single rich ``Text``."""
    output = Text(style=default_style or "")
    for segment in segments:
        style = segment.style or ""
        if not isinstance(segment, AnnotatedSegment):
            output.append(segment.text, style=style)
            continue
        descriptor = segment.descriptor
        if descriptor.render_widget is not None and descriptor.render_text is None:
            # Custom renderings replace the run, icons included.
            output.append_text(widget_text(segment, style))
            continue
        interactions = segment.interactions
        if interactions is None or not show_affordances:
            output.append(segment.text, style=style)
            continue
        icons = affordance_text(segment)
        if not icons:
            output.append(segment.text, style=style)
            continue
        if interactions.icons_at_start:
            output.append_text(icons)
            output.append(" ")
            output.append(segment.text, style=style)
        else:
            output.append(segment.text, style=style)
            output.append(" ")
            output.append_text(icons)
    return output
