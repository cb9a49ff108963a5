"""
Entrypoint run inside the execution environment.

    python -m pagecap.entrypoint <kind> --params '<json>' --output-dir /app/output

Parameters arrive as a JSON document and are handed to Playwright as call
arguments. Captured text (the page title) is the only thing written to
stdout; logs go to stderr. The exit status encodes the error kind.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from .actions import ActionKind
from .browser import BrowserSession
from .errors import ErrorKind, classify_error, exit_code_for
from .actions.request import ActionRequest

logger = logging.getLogger("pagecap.entrypoint")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="pagecap.entrypoint")
    parser.add_argument("kind", choices=[kind.value for kind in ActionKind])
    parser.add_argument("--params", required=True, help="JSON document with url and params")
    parser.add_argument("--output-dir", default="/app/output")
    return parser.parse_args(argv)


async def execute(request: ActionRequest, output_dir: Path, session_factory=BrowserSession):
    """Run one request in a fresh browser session"""
    action = request.to_action()
    if not request.kind.produces_text:
        Path(output_dir).mkdir(parents=True, exist_ok=True)

    async with session_factory() as session:
        return await action.perform(session, Path(output_dir))


def main(argv=None, session_factory=BrowserSession) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    try:
        request = ActionRequest.from_json(args.kind, args.params)
        output = asyncio.run(execute(request, Path(args.output_dir), session_factory))
    except Exception as e:
        kind = classify_error(e)
        logger.error(f"Error: {e}")
        if kind is ErrorKind.UNKNOWN:
            logger.debug("Unclassified failure", exc_info=True)
        return exit_code_for(kind)

    if output.text is not None:
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        sys.stdout.write(output.text + "\n")
        sys.stdout.flush()
    for name in output.artifacts:
        logger.info(f"Wrote {name}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
