"""State and layout of the rotating feature carousel on the dashboard."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Feature:
    """One calculator offered on the dashboard."""

    icon: str
    title: str
    description: str


DEFAULT_FEATURES: tuple[Feature, ...] = (
    Feature("line_chart", "Persamaan\nGaris Lurus", "Buat grafik dari persamaan linear"),
    Feature("box_3d", "Kalkulator\nBangun Ruang", "Volume dan luas permukaan geometri"),
    Feature("dice", "Probabilitas\ndan Peluang", "Kalkulator peluang interaktif"),
    Feature("equation", "Sistem Persamaan\nLinear", "Selesaikan SPLDV dengan eliminasi"),
    Feature("triangle", "Teorema\nPythagoras", "Hitung sisi segitiga siku-siku"),
    Feature("chart", "Statistika\nDasar", "Rata-rata, median, modus dari data"),
    Feature("calc", "Kalkulator\nBasic", "Hitung + - x : pecahan desimal"),
)


@dataclass(frozen=True)
class SlotParams:
    """Placement of a card in a slot relative to the focused one."""

    x_factor: float
    y_offset: float
    rotation: float
    scale: float
    opacity: float


SLOT_PARAMS: dict[int, SlotParams] = {
    -3: SlotParams(-2.5, 80, -22, 0.55, 0.0),
    -2: SlotParams(-1.7, 50, -14, 0.70, 0.0),
    -1: SlotParams(-1.05, 30, -10, 0.84, 0.88),
    0: SlotParams(0.0, 0, 0, 1.00, 1.00),
    1: SlotParams(1.05, 30, 10, 0.84, 0.88),
    2: SlotParams(1.7, 50, 14, 0.70, 0.0),
    3: SlotParams(2.5, 80, 22, 0.55, 0.0),
}

_SLOT_Z = {0: 10.0, 1: 5.0, 2: -1.0}
_MIN_WIDTH = 100
_HEADER_PAD = 42
_DOT_SIZE = 10
_DOT_GAP = 10
_DOT_FOCUSED = 12
_DOT_NORMAL = 8
_WHEEL_THRESHOLD = 20

_LEFT_KEYS = frozenset({"left", "a"})
_RIGHT_KEYS = frozenset({"right", "d"})
_SELECT_KEYS = frozenset({"return", "enter", "space"})


@dataclass(frozen=True)
class CardPlacement:
    """Target position and look of one card; x and y are its top-left corner."""

    index: int
    slot: int
    x: float
    y: float
    scale: float
    opacity: float
    z: float
    rotation: float


def slot_of(card_index: int, focus_index: int, count: int) -> int:
    """Signed slot of a card relative to the focused card, clamped to -3..3."""
    if count <= 0:
        raise ValueError("count must be positive")
    diff = card_index - focus_index
    raw = abs(diff) % count
    if diff < 0:
        raw = -raw
    half = count // 2
    if raw > half:
        raw -= count
    if raw < -half:
        raw += count
    return max(-3, min(3, raw))


class Carousel:
    """Focus, scrolling and layout of the dashboard's feature cards.

    Page indices are 1-based: card ``i`` opens page ``i + 1``.
    """

    card_width: float = 240.0
    card_height: float = 320.0
    title_height: float = 40.0
    subtitle_height: float = 20.0

    def __init__(self, features: Sequence[Feature] | None = None) -> None:
        self.features: tuple[Feature, ...] = tuple(
            DEFAULT_FEATURES if features is None else features
        )
        if not self.features:
            raise ValueError("a carousel needs at least one feature")
        self.focus_index = 0
        self.cooling_down = False

    @property
    def count(self) -> int:
        return len(self.features)

    @property
    def focused_page(self) -> int:
        return self.focus_index + 1

    def _step(self, delta: int) -> bool:
        if self.cooling_down:
            return False
        self.focus_index = (self.focus_index + delta) % self.count
        self.cooling_down = True
        return True

    def scroll_left(self) -> bool:
        """Move focus one card left unless cooling down; report whether it moved."""
        return self._step(-1)

    def scroll_right(self) -> bool:
        """Move focus one card right unless cooling down; report whether it moved."""
        return self._step(1)

    def release_cooldown(self) -> None:
        """End the pause that follows a scroll."""
        self.cooling_down = False

    def focus_card(self, page_index: int) -> int:
        """Focus the card of a 1-based page and return its card index."""
        self.focus_index = (page_index - 1) % self.count
        return self.focus_index

    def click_card(self, card_index: int) -> bool:
        """Scroll toward a clicked neighbour card; report whether focus moved."""
        slot = slot_of(card_index, self.focus_index, self.count)
        if slot == -1:
            return self.scroll_left()
        if slot == 1:
            return self.scroll_right()
        return False

    def handle_key(self, key: str) -> int | None:
        """React to a key name; return the page to open when one is selected."""
        name = key.lower()
        if name in _LEFT_KEYS:
            self.scroll_left()
        elif name in _RIGHT_KEYS:
            self.scroll_right()
        elif name in _SELECT_KEYS:
            return self.focused_page
        return None

    def wheel(self, dx: int, dy: int) -> bool:
        """Scroll by a wheel movement, horizontal first; report whether focus moved."""
        delta = dx if dx != 0 else dy
        if delta > _WHEEL_THRESHOLD:
            return self.scroll_left()
        if delta < -_WHEEL_THRESHOLD:
            return self.scroll_right()
        return False

    def _header_height(self) -> int:
        return int(_HEADER_PAD + self.title_height + 8 + self.subtitle_height + 18)

    def card_center(self, width: float, height: float) -> tuple[float, float]:
        """Centre point of the focused card in a view of the given size."""
        header = self._header_height()
        available = height - header - 60
        return (width / 2.0, header + available * 0.54)

    def placements(self, width: float, height: float) -> list[CardPlacement]:
        """Target placement of every card; empty when the view is too narrow."""
        if width < _MIN_WIDTH:
            return []
        cx, cy = self.card_center(width, height)
        spacing = self.card_width * 1.18
        result = []
        for index in range(self.count):
            slot = slot_of(index, self.focus_index, self.count)
            params = SLOT_PARAMS[slot]
            result.append(
                CardPlacement(
                    index=index,
                    slot=slot,
                    x=cx + params.x_factor * spacing - self.card_width / 2.0,
                    y=cy + params.y_offset - self.card_height / 2.0,
                    scale=params.scale,
                    opacity=params.opacity,
                    z=_SLOT_Z.get(abs(slot), -2.0),
                    rotation=params.rotation,
                )
            )
        return result

    def dot_rects(
        self, width: float, height: float
    ) -> list[tuple[float, float, int, int]]:
        """Rectangles (x, y, w, h) of the page indicator dots."""
        n = self.count
        total = n * _DOT_SIZE + (n - 1) * _DOT_GAP
        start_x = (width - total) / 2.0
        y = height - 38
        rects = []
        for index in range(n):
            size = _DOT_FOCUSED if index == self.focus_index else _DOT_NORMAL
            x = start_x + index * (_DOT_SIZE + _DOT_GAP) + (_DOT_SIZE - size) / 2.0
            rects.append((x, y, size, size))
        return rects