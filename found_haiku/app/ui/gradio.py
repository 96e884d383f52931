"""Gradio front-end for the found haiku generator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

import gradio as gr

if TYPE_CHECKING:  # pragma: no cover - typing only
    from found_haiku.app.app import FoundHaikuApp


_INTERFACE_CSS = """
.haiku-line { font-size: 1.6rem; text-align: center; font-family: Georgia, serif; }
.haiku-counts { text-align: center; opacity: 0.6; letter-spacing: 0.2em; }
.tagline { text-align: center; font-style: italic; opacity: 0.7; }
"""


def render_haiku(app: "FoundHaikuApp") -> Tuple[str, str, str, str]:
    """Compose a haiku and return its three lines plus the syllable readout."""

    haiku = app.generate()
    texts = [line.text for line in haiku.lines]
    while len(texts) < 3:
        texts.append("")
    return texts[0], texts[1], texts[2], haiku.format_counts()


def create_interface(app: "FoundHaikuApp") -> gr.Blocks:
    """Construct the Gradio Blocks page."""

    def generate():
        return render_haiku(app)

    with gr.Blocks(title="Found Haiku", css=_INTERFACE_CSS) as demo:
        gr.Markdown("# Found Haiku")
        gr.Markdown(app.tagline(), elem_classes=["tagline"])

        line1 = gr.Markdown(elem_classes=["haiku-line"])
        line2 = gr.Markdown(elem_classes=["haiku-line"])
        line3 = gr.Markdown(elem_classes=["haiku-line"])
        counts = gr.Markdown(elem_classes=["haiku-counts"])

        button = gr.Button("Generate", variant="primary")
        outputs = [line1, line2, line3, counts]
        button.click(fn=generate, inputs=None, outputs=outputs)
        demo.load(fn=generate, inputs=None, outputs=outputs)

    return demo


__all__ = ["create_interface", "render_haiku"]
