#!/usr/bin/env python3
"""
Demo script to show the controller keeping the password in sync.
"""

import asyncio
import random

from passgen.controller import GeneratorController
from passgen.exceptions import ClipboardWriteError
from passgen.utils.password_generator import PasswordGenerator, describe_charset


def show(controller: GeneratorController, step: str) -> None:
    config = controller.config
    charset = describe_charset(config.digits_enabled, config.symbols_enabled)
    print(f"{step}")
    print(f"   {controller.password}  [{controller.copy_label}]  {charset}")


async def demo_copy(controller: GeneratorController) -> None:
    """Copy, then wait for the label to revert."""
    try:
        await controller.request_copy()
    except ClipboardWriteError as e:
        print(f"   Copy failed: {e}")
        return

    show(controller, "5. Copied")
    await asyncio.sleep(controller.settings.copy_feedback_delay + 0.1)
    show(controller, "6. After the feedback delay")


def main() -> None:
    print("🔐 PASSWORD CONTROLLER DEMO")
    print("=" * 50)

    controller = GeneratorController(generator=PasswordGenerator(rng=random.Random(2024)))
    show(controller, "1. Defaults")

    controller.set_length(32)
    show(controller, "2. set_length(32)")

    controller.toggle_symbols()
    show(controller, "3. toggle_symbols()")

    controller.reset()
    show(controller, "4. reset()")

    asyncio.run(demo_copy(controller))


if __name__ == "__main__":
    main()
