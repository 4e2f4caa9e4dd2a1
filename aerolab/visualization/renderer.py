"""Pygame-based renderer for the car-motion lab.

Provides a side view of the road with:
- City background and the selected car
- Force sliders and force panel
- Start / Reset / Quiz and car selection buttons
- Quiz panel with option buttons and feedback
- Blocking notice for the no-motion case
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

try:
    import pygame
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False

from aerolab.config.car_presets import CAR_PRESETS, CarPreset
from aerolab.config.sliders import SLIDER_SPECS
from aerolab.visualization.widgets import Button, Slider

if TYPE_CHECKING:
    from aerolab.lab import AeroLab

FEEDBACK_COLORS = {
    "green": (40, 170, 70),
    "red": (210, 50, 50),
    "blue": (50, 90, 220),
}

# Skyline blocks as (x fraction, width fraction, height fraction of canvas)
SKYLINE = [
    (0.00, 0.08, 0.45), (0.07, 0.06, 0.62), (0.13, 0.09, 0.38),
    (0.21, 0.05, 0.70), (0.26, 0.10, 0.50), (0.35, 0.07, 0.58),
    (0.42, 0.08, 0.33), (0.50, 0.06, 0.66), (0.56, 0.09, 0.47),
    (0.65, 0.05, 0.74), (0.70, 0.10, 0.40), (0.80, 0.07, 0.60),
    (0.87, 0.06, 0.52), (0.93, 0.07, 0.68),
]


@dataclass
class RenderConfig:
    """Renderer configuration."""
    width: int = 1000
    height: int = 660
    canvas_height: int = 400         # Road scene; controls sit below
    car_width: int = 250
    car_height: int = 120
    road_offset: int = 5             # Gap between car and canvas bottom
    fps: int = 60

    sky_color: Tuple[int, int, int] = (150, 195, 235)
    building_color: Tuple[int, int, int] = (90, 100, 120)
    road_color: Tuple[int, int, int] = (60, 60, 65)
    panel_color: Tuple[int, int, int] = (235, 235, 240)
    button_color: Tuple[int, int, int] = (70, 110, 170)
    button_text_color: Tuple[int, int, int] = (255, 255, 255)
    text_color: Tuple[int, int, int] = (30, 30, 35)
    track_color: Tuple[int, int, int] = (180, 180, 190)
    knob_color: Tuple[int, int, int] = (70, 110, 170)

    @property
    def road_y(self) -> int:
        """Top edge of the car on the canvas."""
        return self.canvas_height - self.car_height - self.road_offset


class PygameRenderer:
    """Real-time renderer and input handler using Pygame."""

    def __init__(self, config: Optional[RenderConfig] = None):
        if not PYGAME_AVAILABLE:
            raise ImportError(
                "Pygame is required for visualization. "
                "Install it with: pip install pygame"
            )

        self.config = config or RenderConfig()
        self._initialized = False

        # Pygame surfaces
        self._screen = None
        self._clock = None
        self._font = None
        self._small_font = None

        # Controls
        self.sliders: List[Slider] = self._build_sliders()
        self.buttons: List[Button] = self._build_buttons()
        self._option_buttons: List[Button] = []
        self._notice_button = Button("OK", (0, 0, 0, 0), "dismiss")
        self._selected_slider = 0

    # Setup

    def _build_sliders(self) -> List[Slider]:
        sliders = []
        y = self.config.canvas_height + 20
        for spec in SLIDER_SPECS.values():
            sliders.append(Slider(spec, (20, y + 22, 220, 16), spec.default))
            y += 55
        return sliders

    def _build_buttons(self) -> List[Button]:
        top = self.config.canvas_height + 160
        buttons = [
            Button("Start", (300, top, 90, 34), "start"),
            Button("Reset", (400, top, 90, 34), "reset"),
            Button("Quiz", (500, top, 90, 34), "quiz"),
        ]
        for i, preset in enumerate(CAR_PRESETS.values()):
            label = f"{i + 1}: {preset.name.split()[0]}"
            buttons.append(Button(label, (300 + i * 100, top + 44, 90, 30), "car", preset.key))
        return buttons

    def init(self) -> None:
        """Initialize Pygame and create window."""
        pygame.init()
        pygame.display.set_caption("AeroLab - Forces and Motion")

        self._screen = pygame.display.set_mode((self.config.width, self.config.height))
        self._clock = pygame.time.Clock()
        self._font = pygame.font.Font(None, 26)
        self._small_font = pygame.font.Font(None, 20)

        self._initialized = True

    def quit(self) -> None:
        """Clean up Pygame."""
        if self._initialized:
            pygame.quit()
            self._initialized = False

    def slider_inputs(self) -> Dict[str, str]:
        """Current slider values as numeric strings keyed by force name."""
        return {slider.spec.key: slider.text_value for slider in self.sliders}

    # Input

    def handle_input(self, lab: AeroLab) -> Dict[str, Any]:
        """Process input events and return requested actions.

        Returns:
            Dictionary with 'quit', 'start', 'reset', 'quiz' and 'dismiss'
            flags, plus 'car' and 'answer' (None when not requested).
        """
        actions: Dict[str, Any] = {
            'quit': False,
            'start': False,
            'reset': False,
            'quiz': False,
            'dismiss': False,
            'car': None,
            'answer': None,
        }
        if not self._initialized:
            return actions

        car_keys = list(CAR_PRESETS.keys())

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                actions['quit'] = True

            elif event.type == pygame.KEYDOWN:
                if lab.notice is not None:
                    if event.key in (pygame.K_RETURN, pygame.K_SPACE, pygame.K_ESCAPE):
                        actions['dismiss'] = True
                elif event.key == pygame.K_ESCAPE:
                    actions['quit'] = True
                elif event.key in (pygame.K_RETURN, pygame.K_SPACE):
                    actions['start'] = True
                elif event.key == pygame.K_r:
                    actions['reset'] = True
                elif event.key == pygame.K_q:
                    actions['quiz'] = True
                elif event.key == pygame.K_UP:
                    self._selected_slider = (self._selected_slider - 1) % len(self.sliders)
                elif event.key == pygame.K_DOWN:
                    self._selected_slider = (self._selected_slider + 1) % len(self.sliders)
                elif event.key == pygame.K_LEFT:
                    self.sliders[self._selected_slider].nudge(-1)
                elif event.key == pygame.K_RIGHT:
                    self.sliders[self._selected_slider].nudge(1)
                elif pygame.K_1 <= event.key < pygame.K_1 + len(car_keys):
                    actions['car'] = car_keys[event.key - pygame.K_1]

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if lab.notice is not None:
                    if self._notice_button.contains(event.pos):
                        actions['dismiss'] = True
                    continue
                self._handle_click(event.pos, actions)

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                for slider in self.sliders:
                    slider.dragging = False

            elif event.type == pygame.MOUSEMOTION:
                for slider in self.sliders:
                    if slider.dragging:
                        slider.set_from_x(event.pos[0])

        return actions

    def _handle_click(self, pos: Tuple[int, int], actions: Dict[str, Any]) -> None:
        for i, slider in enumerate(self.sliders):
            if slider.contains(pos):
                slider.dragging = True
                slider.set_from_x(pos[0])
                self._selected_slider = i
                return

        for button in self.buttons:
            if button.contains(pos):
                if button.action == "car":
                    actions['car'] = button.payload
                else:
                    actions[button.action] = True
                return

        for button in self._option_buttons:
            if button.contains(pos):
                actions['answer'] = button.payload
                return

    # Drawing

    def _draw_text(self, text: str, pos: Tuple[int, int], color=None, font=None) -> None:
        font = font or self._font
        surface = font.render(text, True, color or self.config.text_color)
        self._screen.blit(surface, pos)

    def _wrap(self, text: str, width: int, font=None) -> List[str]:
        font = font or self._font
        lines: List[str] = []
        line = ""
        for word in text.split():
            candidate = f"{line} {word}".strip()
            if line and font.size(candidate)[0] > width:
                lines.append(line)
                line = word
            else:
                line = candidate
        if line:
            lines.append(line)
        return lines

    def _draw_button(self, button: Button, color=None) -> None:
        rect = pygame.Rect(button.rect)
        pygame.draw.rect(self._screen, color or self.config.button_color, rect, border_radius=6)
        text = self._small_font.render(button.label, True, self.config.button_text_color)
        self._screen.blit(text, text.get_rect(center=rect.center))

    def _draw_background(self) -> None:
        cfg = self.config
        pygame.draw.rect(self._screen, cfg.sky_color, (0, 0, cfg.width, cfg.canvas_height))

        ground = cfg.canvas_height - cfg.road_offset - cfg.car_height // 3
        for x_frac, w_frac, h_frac in SKYLINE:
            height = int(ground * h_frac)
            rect = (int(cfg.width * x_frac), ground - height, int(cfg.width * w_frac), height)
            pygame.draw.rect(self._screen, cfg.building_color, rect)

        pygame.draw.rect(
            self._screen, cfg.road_color,
            (0, ground, cfg.width, cfg.canvas_height - ground)
        )

    def _draw_car(self, preset: CarPreset, position: float) -> None:
        cfg = self.config
        x = int(position)
        y = cfg.road_y

        w, h = cfg.car_width, cfg.car_height
        body = pygame.Rect(x, y + h * 2 // 5, w, h * 2 // 5)
        cabin = pygame.Rect(x + w // 5, y + h // 8, w * 11 // 20, h * 3 // 10 + h // 8)
        pygame.draw.rect(self._screen, preset.body_color, cabin, border_radius=18)
        pygame.draw.rect(self._screen, (190, 220, 240), cabin.inflate(-20, -16), border_radius=12)
        pygame.draw.rect(self._screen, preset.body_color, body, border_radius=14)

        radius = h // 6
        for cx in (x + w // 5, x + w * 4 // 5):
            center = (cx, y + h - radius)
            pygame.draw.circle(self._screen, (25, 25, 25), center, radius)
            pygame.draw.circle(self._screen, (170, 170, 175), center, radius // 2)

    def _draw_controls(self, lab: AeroLab) -> None:
        cfg = self.config
        pygame.draw.rect(
            self._screen, cfg.panel_color,
            (0, cfg.canvas_height, cfg.width, cfg.height - cfg.canvas_height)
        )

        for i, slider in enumerate(self.sliders):
            x, y, w, h = slider.rect
            marker = "> " if i == self._selected_slider else ""
            self._draw_text(f"{marker}{slider.spec.label}: {slider.text_value}", (x, y - 22))
            pygame.draw.rect(self._screen, cfg.track_color, (x, y + h // 2 - 3, w, 6), border_radius=3)
            knob_x = x + int(slider.fraction * w)
            pygame.draw.circle(self._screen, cfg.knob_color, (knob_x, y + h // 2), h // 2 + 2)

        readout = lab.model.readout()
        lines = [
            f"Speed: {readout['speed']}",
            f"Tailwind: {readout['tailwind']}",
            f"Friction: {readout['friction']}",
            f"Air Resistance: {readout['air_resistance']}",
            f"Net Velocity: {readout['velocity']}",
        ]
        y = cfg.canvas_height + 15
        for line in lines:
            self._draw_text(line, (300, y))
            y += 26

        for button in self.buttons:
            selected = button.action == "car" and button.payload == lab.car.key
            self._draw_button(button, (40, 60, 100) if selected else None)

    def _draw_quiz(self, lab: AeroLab) -> None:
        quiz = lab.quiz
        self._option_buttons = []
        if not quiz.active:
            return

        left = 640
        width = self.config.width - left - 20
        y = self.config.canvas_height + 15

        if not quiz.awaiting_next and not quiz.completed:
            for line in self._wrap(quiz.current_item.question, width):
                self._draw_text(line, (left, y))
                y += 24
            y += 6
            for option in quiz.current_item.options:
                button = Button(option, (left, y, width, 30), "answer", option)
                self._option_buttons.append(button)
                self._draw_button(button)
                y += 36

        if quiz.feedback.text:
            color = FEEDBACK_COLORS.get(quiz.feedback.color, self.config.text_color)
            self._draw_text(quiz.feedback.text, (left, y + 6), color)

    def _draw_notice(self, notice: str) -> None:
        cfg = self.config
        overlay = pygame.Surface((cfg.width, cfg.height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))
        self._screen.blit(overlay, (0, 0))

        width = 460
        lines = self._wrap(notice, width - 40)
        height = 90 + 24 * len(lines)
        box = pygame.Rect((cfg.width - width) // 2, (cfg.canvas_height - height) // 2, width, height)
        pygame.draw.rect(self._screen, (250, 250, 250), box, border_radius=8)

        y = box.y + 20
        for line in lines:
            self._draw_text(line, (box.x + 20, y))
            y += 24

        self._notice_button.rect = (box.centerx - 40, box.bottom - 50, 80, 34)
        self._draw_button(self._notice_button)

    def render(self, lab: AeroLab) -> None:
        """Render current frame and wait for the next display tick."""
        if not self._initialized:
            self.init()

        self._screen.fill((0, 0, 0))
        self._draw_background()
        self._draw_car(lab.car, lab.model.position)
        self._draw_controls(lab)
        self._draw_quiz(lab)

        if lab.notice is not None:
            self._draw_notice(lab.notice)

        pygame.display.flip()

    def tick(self) -> float:
        """Limit frame rate and return elapsed seconds since the last tick."""
        return self._clock.tick(self.config.fps) / 1000.0 if self._clock else 0.0

    def get_fps(self) -> float:
        """Get current FPS."""
        return self._clock.get_fps() if self._clock else 0.0
