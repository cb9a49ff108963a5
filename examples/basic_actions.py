#!/usr/bin/env python3
"""
pagecap examples - one call per action kind
"""

import asyncio
import sys
import os

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pagecap.runner import RunnerBuilder


async def screenshot_example(runner):
    """Example 1: Viewport screenshot"""
    print("📸 Example 1: Screenshot")
    print("-" * 30)

    result = await runner.capture_screenshot('https://example.com', width=1280, height=720)
    if result.ok:
        directory = result.directory()
        print(f"✅ {directory.names()} in {result.output_dir}, size {directory.image_size('screenshot.png')}\n")
    else:
        print(f"❌ {result.error_kind.value}: {result.error}\n")


async def scroll_example(runner):
    """Example 2: Scroll through a long page"""
    print("📜 Example 2: Scroll and capture")
    print("-" * 30)

    result = await runner.scroll_and_capture('https://en.wikipedia.org/wiki/Web_crawler', scroll_steps=3)
    print(f"✅ {len(result.artifacts)} screenshots\n" if result.ok else f"❌ {result.error}\n")


async def form_example(runner):
    """Example 3: Fill and submit a form"""
    print("📝 Example 3: Form fill")
    print("-" * 30)

    result = await runner.fill_form(
        'https://httpbin.org/forms/post',
        {'input[name="custname"]': "Ada Lovelace", 'input[name="custemail"]': "ada@example.com"},
        'form button'
    )
    print(f"✅ {result.artifacts}\n" if result.ok else f"❌ {result.error}\n")


async def title_example(runner):
    """Example 4: Page title"""
    print("🏷️ Example 4: Title")
    print("-" * 30)

    result = await runner.capture_title('https://example.com')
    print(f"✅ {result.text!r}\n" if result.ok else f"❌ {result.error}\n")


async def main():
    local = "--local" in sys.argv
    builder = RunnerBuilder().with_output_root("pagecap_output/examples")
    runner = builder.locally().build() if local else builder.build()

    if not local:
        environment = await runner.build_environment()
        print(f"🐳 Using {environment.image_tag}\n")

    await screenshot_example(runner)
    await scroll_example(runner)
    await form_example(runner)
    await title_example(runner)


if __name__ == "__main__":
    asyncio.run(main())
