"""
Interactive CLI adapter for the inference gateway.

Architectural role:
- Provides a terminal interface over `gateway.core.engine.RequestRouter`.
- Uses the same router and settings as the HTTP adapter.

Request lifecycle (per user turn):
1. Read a single line from stdin.
2. Handle local control commands (`exit`/`quit`).
3. Select the operation from the command prefix:
   `/think <prompt>` -> reasoning chat, `/image <prompt>` -> image generation,
   anything else -> primary chat.
4. Print the reply body.

Input validation behavior:
- Empty input is ignored and does not call the router.
- A command with no prompt text is forwarded as-is and answered with the
  router's `InvalidRequest` reply.

Error handling strategy:
- Handles EOF and keyboard interrupts without traceback output.
- Router failures are already structured replies; they are printed, not raised.
"""

from dotenv import load_dotenv

load_dotenv()

import asyncio
import logging
import sys

from gateway.core.engine import GatewayReply, RequestRouter
from gateway.llm.provider_config import load_settings

THINK_COMMAND = "/think"
IMAGE_COMMAND = "/image"
EXIT_COMMANDS = ("exit", "quit")


def parse_command(line: str) -> tuple[str, str]:
    """Split an input line into a router operation name and its prompt."""
    for command, operation in ((THINK_COMMAND, "reasoning_chat"), (IMAGE_COMMAND, "generate_image")):
        if line == command or line.startswith(command + " "):
            return operation, line[len(command):].strip()
    return "primary_chat", line


def format_reply(reply: GatewayReply) -> str:
    """Render a reply body for the terminal."""
    body = reply.body
    if "error" in body:
        return f"Error ({reply.status_code}): {body['error']}"
    if "think" in body:
        return f"[think]\n{body['think']}\n\n[say]\n{body['say']}"
    if "result" in body:
        return f"Image: {body['result']}"
    return body.get("answer", "")


def main():
    """Run the interactive terminal session."""
    logging.basicConfig(level=logging.WARNING)

    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")

    router = RequestRouter(load_settings())

    print("Gateway CLI started. (/think, /image, 'exit' to quit)\n")
    print("-" * 60)

    while True:

        try:
            line = input("Prompt: ").strip()

        except EOFError:
            print()
            break

        except KeyboardInterrupt:
            print("\nInterrupted.")
            break

        if not line:
            continue

        if line.lower() in EXIT_COMMANDS:
            print("Shutting down.")
            break

        operation, prompt = parse_command(line)
        reply = asyncio.run(getattr(router, operation)(prompt))

        print("\n" + format_reply(reply))
        print("\n" + "-" * 60 + "\n")


if __name__ == "__main__":
    main()
