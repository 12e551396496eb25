"""Console sound board.

Lists the session controls as numbered entries and triggers the chosen one.

Usage:
    sound-session [--local PATH] [--remote URI] [--quality {high,low}]
                  [--recordings-dir DIR] [-v]
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from sound_session import __version__
from sound_session.controls import build_controls
from sound_session.core import RecordingOptionsPresets, SessionConfig, SessionStartupError
from sound_session.session import SoundSession

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("q", "quit", "exit")


class ConsoleApp:
    """Interactive loop around a SoundSession."""

    def __init__(self, session: SoundSession, input_func=None, output=None):
        self._session = session
        self._input = input_func or input
        self._output = output or sys.stdout

    def render(self):
        controls = build_controls(self._session)
        for index, control in enumerate(controls, start=1):
            suffix = "" if control.enabled else " (busy)"
            print(f"  {index}. {control.label}{suffix}", file=self._output)
        print("  q. Quit", file=self._output)
        return controls

    async def handle(self, choice: str) -> bool:
        """Run the control matching choice.

        Returns:
            False when the user asked to quit
        """
        choice = choice.strip().lower()
        if choice in QUIT_COMMANDS:
            return False

        controls = build_controls(self._session)
        index = int(choice) if choice.isdecimal() else 0
        if not 1 <= index <= len(controls):
            print(f"Unknown choice: {choice!r}", file=self._output)
            return True
        control = controls[index - 1]

        if not control.enabled:
            print(f"{control.label} is busy", file=self._output)
            return True

        await control.action()
        return True

    async def run(self):
        async with self._session:
            while True:
                self.render()
                try:
                    choice = await asyncio.to_thread(self._input, "> ")
                except EOFError:
                    break
                if not await self.handle(choice):
                    break


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sound-session",
        description="Play a local clip, stream a remote sound and record the microphone",
    )
    parser.add_argument("--local", type=str, help="Local sound file played by 'Play Local Sound'")
    parser.add_argument("--remote", type=str, help="Remote sound URI")
    parser.add_argument(
        "--quality",
        type=str,
        choices=["high", "low"],
        help="Recording quality preset (default: high)",
    )
    parser.add_argument("--recordings-dir", type=Path, help="Directory where recordings are written")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_config(args) -> SessionConfig:
    return SessionConfig.from_env(
        local_sound=args.local,
        remote_sound=args.remote,
        recording_options=RecordingOptionsPresets.by_name(args.quality) if args.quality else None,
        recordings_dir=args.recordings_dir,
    )


def main(argv=None):
    """Main entry point for the console sound board."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    session = SoundSession(config=build_config(args))
    try:
        asyncio.run(ConsoleApp(session).run())
    except SessionStartupError as e:
        logger.error(f"Startup failed: {e}")
        return 1
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
