import asyncio
from asyncio.subprocess import PIPE

COMMAND = "rofi"
CHOICES = ("Yes", "No")


def rofi_args(
    prompt: str, config: str | None = None, styles: str | None = None
) -> list[str]:
    args = ["-dmenu", "-auto-select", "-i", "-p", prompt]
    if config is not None:
        args.extend(["-config", config])
    if styles is not None:
        args.extend(["-theme-str", styles])
    return args


async def prompt_user(
    prompt: str, config: str | None = None, styles: str | None = None
) -> bool:
    """
    Asks for confirmation through rofi. Anything but picking the first
    choice, including dismissing the menu, counts as a no.
    """
    process = await asyncio.create_subprocess_exec(
        COMMAND, *rofi_args(prompt, config, styles), stdin=PIPE, stdout=PIPE
    )
    stdout, _ = await process.communicate("\n".join(CHOICES).encode())
    return stdout.decode(errors="replace") == f"{CHOICES[0]}\n"
