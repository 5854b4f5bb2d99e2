# File: ytclip/cli/main.py

import argparse
import logging
import sys
import tempfile
from pathlib import Path
from typing import List, Optional

from ytclip.core.config.settings import settings
from ytclip.core.common.enums import ExitCode
from ytclip.core.errors import ValidationError
from ytclip.features.request_validation.domain.models import HostPolicy
from ytclip.features.request_validation.service.api import default_host_policy, validate
from ytclip.features.video_clipping.domain.models import ClipResult
from ytclip.features.video_clipping.service.api import clip_video
from ytclip.features.video_clipping.service.command_builder import build_commands
from ytclip.features.video_clipping.service.reporter import report

LOG_FORMAT = "[%(levelname)s] %(message)s"


class ClipArgumentParser(argparse.ArgumentParser):
    """Usage errors are validation errors: exit 1 instead of argparse's 2."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(int(ExitCode.VALIDATION), f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = ClipArgumentParser(
        prog="ytclip",
        description="Download specific clips from YouTube videos.",
        epilog="Exit codes: 0 success, 1 invalid arguments, 2 download failed, 3 encoding failed."
    )
    parser.add_argument("url", help="YouTube URL to download from")
    parser.add_argument("start_time", help="Start time (e.g., 1:30, 90, 1:30:45)")
    parser.add_argument("end_time", help="End time (e.g., 2:45, 165, 2:45:30)")
    parser.add_argument(
        "-o", "--output",
        help="Custom output filename (default: <video id>_clip_<start>_<end>.mp4)"
    )
    parser.add_argument(
        "-s", "--speed",
        type=float,
        default=None,
        help="Playback speed (0.5 to 4.0, default 1.0)"
    )
    parser.add_argument(
        "--any-host",
        action="store_true",
        help="Accept URLs from any host (only rejects empty URLs)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the yt-dlp and ffmpeg commands without running them"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging, including the tools' stderr"
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {settings.VERSION}"
    )
    return parser


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.LOG_LEVEL, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _policy(args: argparse.Namespace) -> HostPolicy:
    base = default_host_policy()
    if args.any_host:
        return HostPolicy(check_host=False, extra_hosts=base.extra_hosts)
    return base


def dry_run(args: argparse.Namespace) -> int:
    """Validates and prints both commands; nothing is executed."""
    try:
        request = validate(args.url, args.start_time, args.end_time,
                           speed=args.speed, output=args.output, policy=_policy(args))
        workdir = Path(settings.TEMP_DIR or tempfile.gettempdir()) / "ytclip-<run>"
        plan = build_commands(request, workdir)
    except ValidationError as e:
        return report(ClipResult.failed(e))

    print(plan.retrieval)
    print(plan.transcode)
    return int(ExitCode.SUCCESS)


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point. Returns the process exit code.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    if args.dry_run:
        return dry_run(args)

    try:
        result = clip_video(
            args.url,
            args.start_time,
            args.end_time,
            output=args.output,
            speed=args.speed,
            policy=_policy(args)
        )
    except KeyboardInterrupt:
        # Child process already killed, temp files already removed
        print("[ABORTED] Interrupted by user", file=sys.stderr)
        return int(ExitCode.INTERRUPTED)

    return report(result)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
