#!/usr/bin/env python3
"""Headless motion demo.

This example demonstrates:
- Setting forces the way the sliders do (numeric strings)
- Starting the car and stepping frames on the frame clock
- The no-motion case when opposing forces win

Run with: python examples/motion_demo.py
"""

from aerolab.lab import AeroLab


def run_case(title, inputs, frames=60):
    lab = AeroLab()
    print(title)
    print("-" * 40)

    if lab.start(inputs):
        position = lab.world.run(frames)
        readout = lab.model.readout()
        print(f"  Net velocity: {readout['velocity']} px/frame")
        print(f"  Position after {frames} frames: {position:.1f} px")
    else:
        print(f"  {lab.notice}")
    print()


def main():
    """Run two motion cases."""
    print("AeroLab Motion Demo")
    print("=" * 40)
    print()

    run_case(
        "Helping forces win",
        {"speed": "6", "tailwind": "2", "friction": "1", "air_resistance": "3"},
    )
    run_case(
        "Opposing forces win",
        {"speed": "3", "tailwind": "0", "friction": "2", "air_resistance": "4"},
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
