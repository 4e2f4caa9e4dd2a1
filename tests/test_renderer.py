import pytest

pygame = pytest.importorskip("pygame")

from aerolab.config.car_presets import CAR_PRESETS
from aerolab.visualization.renderer import PygameRenderer


@pytest.fixture
def renderer(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    renderer = PygameRenderer()
    renderer.init()
    pygame.event.clear()
    yield renderer
    renderer.quit()


def press(key):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=key))


def click(rect):
    x, y, w, h = rect
    pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(x + w // 2, y + h // 2)))


def button_for(renderer, action, payload=None):
    for button in renderer.buttons:
        if button.action == action and button.payload == payload:
            return button
    raise LookupError(action)


@pytest.mark.parametrize("index", range(len(CAR_PRESETS)))
def test_number_keys_select_car(renderer, lab, index):
    press(pygame.K_1 + index)
    actions = renderer.handle_input(lab)
    assert actions['car'] == list(CAR_PRESETS)[index]


def test_enter_starts_and_escape_quits(renderer, lab):
    press(pygame.K_RETURN)
    assert renderer.handle_input(lab)['start']

    press(pygame.K_ESCAPE)
    assert renderer.handle_input(lab)['quit']


def test_keys_dismiss_open_notice(renderer, lab, blocked_inputs):
    lab.start(blocked_inputs)

    press(pygame.K_ESCAPE)
    actions = renderer.handle_input(lab)
    assert actions['dismiss']
    assert not actions['quit']

    press(pygame.K_RETURN)
    actions = renderer.handle_input(lab)
    assert actions['dismiss']
    assert not actions['start']


def test_notice_blocks_other_clicks(renderer, lab, blocked_inputs):
    lab.start(blocked_inputs)
    renderer.render(lab)

    click(button_for(renderer, "start").rect)
    actions = renderer.handle_input(lab)
    assert not actions['start']
    assert not actions['dismiss']

    click(renderer._notice_button.rect)
    assert renderer.handle_input(lab)['dismiss']


def test_button_clicks(renderer, lab):
    click(button_for(renderer, "start").rect)
    assert renderer.handle_input(lab)['start']

    click(button_for(renderer, "car", "green_truck").rect)
    assert renderer.handle_input(lab)['car'] == "green_truck"


def test_option_click_answers_quiz(renderer, lab):
    lab.start_quiz()
    renderer.render(lab)

    option = renderer._option_buttons[0]
    click(option.rect)
    assert renderer.handle_input(lab)['answer'] == option.payload == "Tailwind"


def test_no_option_buttons_during_delay(renderer, lab):
    lab.start_quiz()
    lab.answer("Tailwind")
    renderer.render(lab)
    assert renderer._option_buttons == []


def test_arrow_keys_adjust_selected_slider(renderer, lab):
    press(pygame.K_RIGHT)
    renderer.handle_input(lab)
    assert renderer.slider_inputs()["speed"] == "6"

    press(pygame.K_DOWN)
    press(pygame.K_RIGHT)
    press(pygame.K_RIGHT)
    renderer.handle_input(lab)
    assert renderer.slider_inputs()["tailwind"] == "2"


@pytest.mark.parametrize("key", list(CAR_PRESETS))
def test_each_car_is_drawn_in_its_color(renderer, lab, key):
    lab.change_car(key)
    renderer.render(lab)

    cfg = renderer.config
    # Middle of the lower body panel
    point = (cfg.car_width // 2, cfg.road_y + cfg.car_height * 3 // 5)
    assert tuple(renderer._screen.get_at(point))[:3] == CAR_PRESETS[key].body_color
