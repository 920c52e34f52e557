"""HTML rendering of the janken page."""

from __future__ import annotations

from html import escape

from janken.view.display_state import DisplayState, ResultCard


TITLE = "じゃんけん"
PROMPT = "あなたの手を選んでください"
COMFORT_BUTTON_LABEL = "傷ついた心を癒してもらうわん"

CENTER = "text-align: center;"
HAND_ROW_STYLE = "display: flex; gap: 12px; align-items: center; justify-content: center;"
HAND_BUTTON_STYLE = "padding: 4px 8px; background-color: #000; border-radius: 12px;"
CARD_ROW_STYLE = (
    "display: flex; gap: 24px; align-items: center; justify-content: center; margin-top: 64px"
)
CARD_COLUMN_STYLE = (
    "display: flex; flex-direction: column; align-items: center; justify-content: center;"
)
CARD_STYLE = "padding: 4px 8px; border-radius: 12px; width: 64px;height: 64px; background-color: {color}"
COMFORT_STYLE = (
    "margin: 0 auto; width: 144px; display:flex; flex-direction: column; align-items:center;"
)


def _attr(value: str) -> str:
    return escape(value, quote=True)


class PageRenderer:
    """Renders a DisplayState as a complete HTML page."""

    def render(self, display: DisplayState) -> str:
        lines: list[str] = [
            "<!DOCTYPE html>",
            '<html lang="ja">',
            "<head>",
            '<meta charset="utf-8">',
            f"<title>{TITLE}</title>",
            "</head>",
            "<body>",
            "<div>",
            f'<h3 style="{CENTER}">{TITLE}</h3>',
            f'<p style="{CENTER}">{PROMPT}</p>',
        ]

        lines.extend(self._hand_buttons(display))
        lines.extend(self._result_cards(display))

        lines.append('<div style="margin-top:64px;">')
        lines.append(f'<h3 style="{CENTER}">{escape(display.result_text)}</h3>')
        lines.append("</div>")

        if display.show_comfort:
            lines.extend(self._comfort_block(display))

        lines.extend(["</div>", "</body>", "</html>"])
        return "\n".join(lines)

    def _hand_buttons(self, display: DisplayState) -> list[str]:
        lines = [f'<div style="{HAND_ROW_STYLE}">']
        for i, url in enumerate(display.hand_image_urls):
            lines.append(f'<form method="post" action="/hands/{i + 1}">')
            lines.append(
                f'<button type="submit" style="{HAND_BUTTON_STYLE}">'
                f'<img width="64px" src="{_attr(url)}"></button>'
            )
            lines.append("</form>")
        lines.append("</div>")
        return lines

    def _result_cards(self, display: DisplayState) -> list[str]:
        lines = [f'<div style="{CARD_ROW_STYLE}">']
        for card in display.cards:
            lines.extend(self._card(card))
        lines.append("</div>")
        return lines

    def _card(self, card: ResultCard) -> list[str]:
        style = CARD_STYLE.format(color=card.color.value)
        lines = [
            f'<div style="{CARD_COLUMN_STYLE}">',
            f'<div style="{style}">',
        ]
        if card.hand is not None:
            lines.append(f'<img width="64px" src="{_attr(card.image_url)}">')
        lines.append("</div>")
        lines.append(f'<p style="height: 12px; margin: 0;">{card.player.label}</p>')
        lines.append("</div>")
        return lines

    def _comfort_block(self, display: DisplayState) -> list[str]:
        return [
            f'<div style="{COMFORT_STYLE}">',
            '<form method="post" action="/comfort-image">',
            f'<button type="submit">{COMFORT_BUTTON_LABEL}</button>',
            "</form>",
            f'<img style="margin-top: 24px; max-height: 480px" '
            f'src="{_attr(display.comfort_image.message)}">',
            "</div>",
        ]
