"""Entry point for punchcalc package."""

import argparse
import logging

from punchcalc.config import get_config


def run_demo(punch: str, seconds: float, every: int) -> None:
    """Animate a preset headlessly and print the fist path."""
    from punchcalc.animation import AnimationController, ManualFrameScheduler
    from punchcalc.kinematics import Scene, apply_preset

    config = get_config()
    scheduler = ManualFrameScheduler()
    controller = AnimationController(
        scene=apply_preset(Scene.initial(), punch),
        scheduler=scheduler,
        tick_seconds=config.tick_seconds,
    )

    preset = controller.parameters
    print(f"Punch Calculator - {punch} (Demo Mode)")
    print("=" * 50)
    print(f"Hip {preset.hip_rotation:g}°/s  Spine k={preset.spine_spring:g}  "
          f"Shoulder {preset.shoulder_rotation:g}°/s  Elbow {preset.elbow_rotation:g}°/s")
    print()

    controller.play()
    frames = controller.clock.seconds_to_ticks(seconds)
    for _ in range(frames - 1):
        if controller.clock.tick_count % every == 0:
            pose = controller.current_pose()
            print(f"{controller.clock.format_time():>22}  "
                  f"fist=({pose.fist.x:7.2f}, {pose.fist.y:7.2f})  "
                  f"to target={pose.fist.distance_to(pose.target):6.2f} cm")
        scheduler.run_frame()
    controller.pause()


def main() -> None:
    """Main entry point for the Punch Calculator."""
    parser = argparse.ArgumentParser(
        description="Punch Calculator - kinetic chain punch visualizer",
        prog="punchcalc",
    )
    subparsers = parser.add_subparsers(dest="command")

    serve = subparsers.add_parser("serve", help="Run the web server (default)")
    serve.add_argument("--host", type=str, default=None, help="Bind address (default: config)")
    serve.add_argument("--port", type=int, default=None, help="Port (default: config, 3000)")
    serve.add_argument("--reload", action="store_true", help="Reload on code changes")

    demo = subparsers.add_parser("demo", help="Print a headless animation of a preset")
    demo.add_argument("--punch", type=str, default="jab", help="Preset name (default: jab)")
    demo.add_argument("--seconds", type=float, default=1.0, help="Animation length (default: 1.0)")
    demo.add_argument("--every", type=int, default=6, help="Print every Nth frame (default: 6)")

    args = parser.parse_args()

    config = get_config()
    errors = config.validate()
    if errors:
        parser.error("; ".join(errors))

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "demo":
        from punchcalc.kinematics import PUNCH_PRESETS

        if args.punch not in PUNCH_PRESETS:
            parser.error(f"unknown punch {args.punch!r}, choose from: {', '.join(PUNCH_PRESETS)}")
        run_demo(args.punch, args.seconds, max(1, args.every))
    else:
        from punchcalc.api.main import run_api

        run_api(
            host=getattr(args, "host", None),
            port=getattr(args, "port", None),
            reload=getattr(args, "reload", False),
        )


if __name__ == "__main__":
    main()
