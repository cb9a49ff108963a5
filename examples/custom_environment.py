#!/usr/bin/env python3
"""
Running actions against an alternative image
"""

import asyncio
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pagecap.environment import EnvironmentSpec
from pagecap.runner import RunnerBuilder


async def main():
    # Playwright's own image already ships browsers and their libraries
    spec = EnvironmentSpec(
        base_image="mcr.microsoft.com/playwright/python:v1.47.0-jammy",
        os_packages=(),
        env_vars={"PYTHONUNBUFFERED": "1"},
    )

    runner = (RunnerBuilder()
              .with_environment(spec)
              .with_run_timeout(120)
              .with_logging()
              .build())

    environment = await runner.build_environment()
    print(f"🐳 {environment.image_tag} ({'reused' if environment.reused else 'built'})")

    result = await runner.click_and_capture('https://example.com', 'a', wait_time=500)
    print(f"✅ {result.output_dir}" if result.ok else f"❌ {result.error_kind.value}: {result.error}")


if __name__ == "__main__":
    asyncio.run(main())
