"""
Command line interface
"""

import argparse
import asyncio
import logging
import sys

from .config import RunnerConfig
from .errors import PagecapError
from .runner import RunnerBuilder

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pagecap", description="Run browser actions in a disposable container")
    parser.add_argument("--local", action="store_true", help="use the host's Playwright instead of docker")
    parser.add_argument("--output-root", help="directory that receives per-call output directories")
    parser.add_argument("--log-level", default=None)
    parser.add_argument("--timeout", type=float, default=None, help="container run timeout in seconds")

    commands = parser.add_subparsers(dest="command", required=True)

    build = commands.add_parser("build", help="build (or reuse) the environment image")
    build.add_argument("--force", action="store_true")

    screenshot = commands.add_parser("screenshot", help="capture screenshot.png")
    screenshot.add_argument("url")
    screenshot.add_argument("--width", type=int, default=1280)
    screenshot.add_argument("--height", type=int, default=720)
    screenshot.add_argument("--full-page", action="store_true")

    click = commands.add_parser("click", help="click a selector and capture after-click.png")
    click.add_argument("url")
    click.add_argument("selector")
    click.add_argument("--wait-time", type=int, default=1000, help="milliseconds to wait after the click")

    scroll = commands.add_parser("scroll", help="capture scroll-0.png .. scroll-N.png")
    scroll.add_argument("url")
    scroll.add_argument("--steps", type=int, default=3)
    scroll.add_argument("--step-size", type=int, default=800)

    form = commands.add_parser("fill-form", help="fill and submit a form")
    form.add_argument("url")
    form.add_argument("form_data", help='JSON object, e.g. \'{"#name": "Ada"}\'')
    form.add_argument("submit_selector")

    title = commands.add_parser("title", help="print the page title")
    title.add_argument("url")

    return parser


def make_runner(args):
    config = RunnerConfig.from_env(
        output_root=args.output_root,
        log_level=args.log_level,
        run_timeout=args.timeout
    )
    builder = RunnerBuilder(config).with_logging()
    if args.local:
        builder.locally()
    return builder.build()


async def dispatch(args) -> int:
    runner = make_runner(args)

    if args.command == "build":
        environment = await runner.build_environment(force=args.force)
        if environment is None:
            print("Local mode has no environment to build")
        else:
            state = "reused" if environment.reused else "built"
            print(f"✅ Environment {environment.image_tag} {state}")
        return 0

    if args.command == "screenshot":
        result = await runner.capture_screenshot(args.url, args.width, args.height, args.full_page)
    elif args.command == "click":
        result = await runner.click_and_capture(args.url, args.selector, args.wait_time)
    elif args.command == "scroll":
        result = await runner.scroll_and_capture(args.url, args.steps, args.step_size)
    elif args.command == "fill-form":
        result = await runner.fill_form(args.url, args.form_data, args.submit_selector)
    else:
        result = await runner.capture_title(args.url)

    if not result.ok:
        print(f"❌ {result.kind.value} failed ({result.error_kind.value}): {result.error}", file=sys.stderr)
        return result.exit_code or 1

    if result.text is not None:
        print(result.text)
    else:
        print(f"📸 {len(result.artifacts)} file(s) in {result.output_dir}")
        for name in result.artifacts:
            print(f"  {name}")
    return 0


def run(argv=None):
    args = build_parser().parse_args(argv)
    try:
        return asyncio.run(dispatch(args))
    except KeyboardInterrupt:
        print("\n🛑 Stopped by user")
        return 130
    except PagecapError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(run())
