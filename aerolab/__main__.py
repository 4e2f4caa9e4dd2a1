"""CLI entry point for AeroLab.

Run with: python -m aerolab [command]

Commands:
    run       - Open the interactive lab window
    quiz      - Take the forces quiz in the terminal
    plot      - Plot position and force balance
    info      - Show car presets and slider ranges
"""

import sys
import math
import time
import argparse
import logging


def _force_inputs(args):
    """Slider-style inputs from CLI options that were given."""
    inputs = {}
    for key in ("speed", "friction", "tailwind", "air_resistance"):
        value = getattr(args, key, None)
        if value is not None:
            inputs[key] = value
    return inputs


def run_lab(args):
    """Run the interactive lab window."""
    try:
        from aerolab.visualization import PygameRenderer
    except ImportError:
        print("Error: Pygame is required for the lab window.")
        print("Install it with: pip install pygame")
        return 1

    from aerolab.lab import AeroLab

    print("AeroLab")
    print("=" * 40)
    print(f"Car: {args.car}")
    print()
    print("Controls:")
    print("  ↑/↓          - Select slider")
    print("  ←/→          - Adjust slider")
    print("  Enter/Space  - Start")
    print("  R            - Reset")
    print("  Q            - Start quiz")
    print("  1-3          - Change car")
    print("  Esc          - Quit")
    print()

    try:
        lab = AeroLab(car=args.car)
        renderer = PygameRenderer()
    except (ValueError, ImportError) as e:
        print(f"Error: {e}")
        return 1

    for slider in renderer.sliders:
        value = getattr(args, slider.spec.key, None)
        if value is not None:
            slider.value = slider.spec.clamp(value)

    renderer.init()
    real_dt = 0.0

    try:
        while True:
            actions = renderer.handle_input(lab)

            if actions['quit']:
                break
            if actions['dismiss']:
                lab.dismiss_notice()
            if actions['reset']:
                lab.reset()
            if actions['start']:
                lab.start(renderer.slider_inputs())
            if actions['car']:
                lab.change_car(actions['car'])
            if actions['quiz']:
                lab.start_quiz()
            if actions['answer']:
                lab.answer(actions['answer'])

            lab.update(real_dt)
            renderer.render(lab)
            real_dt = renderer.tick()

    except KeyboardInterrupt:
        pass
    finally:
        renderer.quit()

    print("Lab closed.")
    return 0


def run_quiz(args):
    """Take the quiz in the terminal."""
    if not math.isfinite(args.delay) or args.delay < 0:
        print(f"Error: delay must be a non-negative number of seconds, got {args.delay:g}")
        return 1

    from aerolab.quiz.sequencer import QuizSequencer

    quiz = QuizSequencer()
    quiz.start()

    while not quiz.completed:
        item = quiz.current_item
        print()
        print(f"Question {quiz.current_index + 1}/{len(quiz)}: {item.question}")
        for i, option in enumerate(item.options, start=1):
            print(f"  {i}. {option}")

        try:
            choice = input("Your answer (number): ").strip()
        except EOFError:
            print()
            return 1

        try:
            selected = item.options[int(choice) - 1]
        except (ValueError, IndexError):
            print(f"Please enter a number between 1 and {len(item.options)}.")
            continue

        feedback = quiz.answer(selected)
        print(feedback.display)

        if quiz.awaiting_next:
            time.sleep(args.delay)
            quiz.show_next()

    return 0


def plot_motion(args):
    """Plot position over frames and the force balance."""
    if args.frames < 0:
        print(f"Error: frames must be non-negative, got {args.frames}")
        return 1

    try:
        import matplotlib.pyplot as plt
    except ImportError:
        print("Error: Matplotlib is required for plotting.")
        print("Install it with: pip install matplotlib")
        return 1

    from aerolab.core.motion import MotionModel
    from aerolab.config.sliders import SLIDER_SPECS
    from aerolab.visualization.plotter import MotionPlotter
    from aerolab.visualization.renderer import RenderConfig

    model = MotionModel()
    inputs = {key: spec.default for key, spec in SLIDER_SPECS.items()}
    inputs.update(_force_inputs(args))

    if not model.start(inputs):
        print("Note: the car will not move, net velocity is "
              f"{model.velocity:.2f}.")

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 5))

    MotionPlotter.plot_position(model, args.frames, canvas_width=RenderConfig().width, ax=ax1)
    MotionPlotter.plot_forces(model, ax=ax2)

    fig.suptitle('Net Velocity = (Speed + Tailwind) - (Friction + Air Resistance)')
    plt.tight_layout()

    if args.output:
        plt.savefig(args.output, dpi=150)
        print(f"Saved to: {args.output}")
    else:
        plt.show()

    return 0


def show_info(args):
    """Show available presets and slider ranges."""
    from aerolab import __version__
    from aerolab.config.car_presets import CAR_PRESETS
    from aerolab.config.sliders import SLIDER_SPECS

    print(f"AeroLab v{__version__}")
    print("=" * 40)
    print()

    print("Car Presets:")
    print("-" * 30)
    for key, preset in CAR_PRESETS.items():
        print(f"  {key:15} - {preset.description}")
    print()

    print("Sliders:")
    print("-" * 30)
    for key, spec in SLIDER_SPECS.items():
        print(f"  {key:15} - {spec.minimum:g} to {spec.maximum:g} (default {spec.default:g})")
    print()

    return 0


def _add_force_options(parser):
    parser.add_argument("--speed", type=float, help="Speed slider value")
    parser.add_argument("--friction", type=float, help="Friction slider value")
    parser.add_argument("--tailwind", type=float, help="Tailwind slider value")
    parser.add_argument(
        "--air", dest="air_resistance", type=float,
        help="Air resistance slider value"
    )


def build_parser():
    parser = argparse.ArgumentParser(
        description="AeroLab - See how forces change a car's motion",
        prog="aerolab"
    )
    parser.add_argument(
        "--version", action="version",
        version="%(prog)s 0.1.0"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Lab window command
    run_parser = subparsers.add_parser("run", help="Open the interactive lab")
    run_parser.add_argument(
        "-c", "--car",
        default="red_coupe",
        help="Car preset to use (default: red_coupe)"
    )
    _add_force_options(run_parser)

    # Quiz command
    quiz_parser = subparsers.add_parser("quiz", help="Take the forces quiz")
    quiz_parser.add_argument(
        "-d", "--delay",
        type=float, default=1.0,
        help="Pause after a correct answer in seconds (default: 1.0)"
    )

    # Plot command
    plot_parser = subparsers.add_parser("plot", help="Plot position and forces")
    plot_parser.add_argument(
        "-n", "--frames",
        type=int, default=120,
        help="Number of frames to plot (default: 120)"
    )
    plot_parser.add_argument(
        "-o", "--output",
        help="Save plot to file instead of displaying"
    )
    _add_force_options(plot_parser)

    # Info command
    subparsers.add_parser("info", help="Show car presets and slider ranges")

    return parser


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )

    if args.command == "run":
        return run_lab(args)
    elif args.command == "quiz":
        return run_quiz(args)
    elif args.command == "plot":
        return plot_motion(args)
    elif args.command == "info":
        return show_info(args)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
