"""
Command-line interface for vttparse.

This module provides CLI functionality for parsed WebVTT documents:
- dump: write a document (or every block) as JSON
- check: validate one file or a directory of files block by block
- show: print cues in a readable form
"""

import argparse
import logging
import os
import sys
from contextlib import closing
from pathlib import Path
from typing import Dict, List, Optional
from dotenv import load_dotenv
from ..core.blocks import Cue
from ..core.errors import VTTError
from ..core.scanner import iter_file_blocks, parse_file
from ..core.serialization import block_to_dict, dump_json, webvtt_to_dict
from ..core.timing_utils import TimeConverter
from ..utils.constants import APP_NAME, APP_VERSION, APP_DESCRIPTION, ENV_ENCODING, ENV_LOG_FILE
from ..utils.file_operations import FileHandler
from ..utils.logging_config import setup_logging

logger = logging.getLogger(APP_NAME)


def setup_cli_logging(verbose: bool = False, debug: bool = False,
                      log_file: Optional[Path] = None) -> logging.Logger:
    """Set up logging for CLI operations."""
    global logger

    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logger = setup_logging(level=level, log_file=log_file, use_colors=True)
    return logger


class CLIHandler:
    """Handles command-line interface operations."""

    def create_parser(self) -> argparse.ArgumentParser:
        """
        Create the main argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog=APP_NAME,
            description=APP_DESCRIPTION,
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=f"""
Examples:
  # Print all cues as JSON
  {APP_NAME} dump captions.vtt

  # Include NOTE, STYLE and REGION blocks
  {APP_NAME} dump captions.vtt --blocks -o captions.json

  # Validate every VTT file under a directory
  {APP_NAME} check /media/captions --recursive

  # Read cues with speakers
  {APP_NAME} show interview.vtt

Environment:
  {ENV_ENCODING}   input encoding (skips detection)
  {ENV_LOG_FILE}   also write log messages to this file
            """
        )

        parser.add_argument('--version', action='version', version=f'{APP_NAME} {APP_VERSION}')
        parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose output')
        parser.add_argument('-d', '--debug', action='store_true', help='Enable debug output')
        parser.add_argument('--log-file', type=Path, help=f'Write log output to this file (or set {ENV_LOG_FILE})')

        subparsers = parser.add_subparsers(dest='command', help='Available commands')

        self._add_dump_parser(subparsers)
        self._add_check_parser(subparsers)
        self._add_show_parser(subparsers)

        return parser

    def _add_dump_parser(self, subparsers):
        """Add dump command parser."""
        dump_parser = subparsers.add_parser(
            'dump',
            help='Export a WebVTT file as JSON',
            description='Parse a WebVTT file and write its cues (or all blocks) as JSON'
        )

        dump_parser.add_argument('input', type=Path, help='WebVTT file to parse')
        dump_parser.add_argument('-o', '--output', type=Path, help='Output file (default: stdout)')
        dump_parser.add_argument('-b', '--blocks', action='store_true',
                                 help='Export every block, including NOTE, STYLE and REGION')
        dump_parser.add_argument('-e', '--encoding',
                                 help=f'Input encoding (default: auto-detect, or {ENV_ENCODING})')

    def _add_check_parser(self, subparsers):
        """Add check command parser."""
        check_parser = subparsers.add_parser(
            'check',
            help='Validate WebVTT files',
            description='Parse files block by block and report every block that fails'
        )

        check_parser.add_argument('path', type=Path, help='WebVTT file or directory')
        check_parser.add_argument('-r', '--recursive', action='store_true',
                                  help='Process subdirectories recursively')
        check_parser.add_argument('-e', '--encoding',
                                  help=f'Input encoding (default: auto-detect, or {ENV_ENCODING})')

    def _add_show_parser(self, subparsers):
        """Add show command parser."""
        show_parser = subparsers.add_parser(
            'show',
            help='Print cues in readable form',
            description='Print each cue with its time range and speakers'
        )

        show_parser.add_argument('input', type=Path, help='WebVTT file to parse')
        show_parser.add_argument('-e', '--encoding',
                                 help=f'Input encoding (default: auto-detect, or {ENV_ENCODING})')

    def handle_command(self, args) -> int:
        """
        Handle the parsed command-line arguments.

        Args:
            args: Parsed arguments from argparse

        Returns:
            Exit code (0 for success, non-zero for failure)
        """
        log_file = args.log_file
        if log_file is None and os.getenv(ENV_LOG_FILE):
            log_file = Path(os.getenv(ENV_LOG_FILE))
        setup_cli_logging(args.verbose, args.debug, log_file)

        if not args.command:
            logger.error("No command specified. Use --help for usage information.")
            return 1

        try:
            if args.command == 'dump':
                return self._handle_dump(args)
            elif args.command == 'check':
                return self._handle_check(args)
            elif args.command == 'show':
                return self._handle_show(args)
            else:
                logger.error(f"Unknown command: {args.command}")
                return 1

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 1
        except Exception as e:
            logger.error(f"Unexpected error: {e}")
            if args.debug:
                import traceback
                traceback.print_exc()
            return 1

    @staticmethod
    def _encoding(args) -> Optional[str]:
        """Encoding from the command line, then the environment."""
        return args.encoding or os.getenv(ENV_ENCODING) or None

    def _handle_dump(self, args) -> int:
        """Handle dump command."""
        if not args.input.exists():
            logger.error(f"Input file not found: {args.input}")
            return 1

        encoding = self._encoding(args)
        if args.blocks:
            records = []
            with closing(iter_file_blocks(args.input, encoding)) as results:
                for block, err in results:
                    if err is not None:
                        logger.error(f"{args.input}: {err}")
                        return 1
                    records.append(block_to_dict(block))
            output = dump_json(records)
        else:
            try:
                vtt = parse_file(args.input, encoding)
            except VTTError as e:
                logger.error(f"{args.input}: {e}")
                return 1
            output = dump_json(webvtt_to_dict(vtt))

        if args.output:
            args.output.write_text(output + '\n', encoding='utf-8')
            logger.info(f"Wrote JSON to {args.output}")
        else:
            print(output)
        return 0

    def _handle_check(self, args) -> int:
        """Handle check command."""
        if args.path.is_dir():
            files = FileHandler.find_vtt_files(args.path, args.recursive)
            if not files:
                logger.warning(f"No VTT files found in {args.path}")
                return 0
        elif args.path.exists():
            files = [args.path]
        else:
            logger.error(f"Path not found: {args.path}")
            return 1

        encoding = self._encoding(args)
        failed = 0
        for file_path in files:
            if not self._check_file(file_path, encoding):
                failed += 1

        print(f"\nChecked {len(files)} file(s): {len(files) - failed} ok, {failed} with errors")
        return 1 if failed else 0

    def _check_file(self, file_path: Path, encoding: Optional[str]) -> bool:
        """Validate one file and print a summary line. Returns True when clean."""
        counts: Dict[str, int] = {'cue': 0, 'note': 0, 'style': 0, 'region': 0}
        errors: List[str] = []

        for index, (block, err) in enumerate(iter_file_blocks(file_path, encoding), start=1):
            if err is not None:
                errors.append(f"block {index}: {err}")
                continue
            counts[block.block_type.value] += 1

        summary = ', '.join(f"{count} {name}(s)" for name, count in counts.items())
        if errors:
            print(f"FAIL {file_path}: {summary}")
            for message in errors:
                print(f"  {message}")
                logger.debug(f"{file_path}: {message}")
            return False

        print(f"OK   {file_path}: {summary}")
        return True

    def _handle_show(self, args) -> int:
        """Handle show command."""
        if not args.input.exists():
            logger.error(f"Input file not found: {args.input}")
            return 1

        try:
            vtt = parse_file(args.input, self._encoding(args))
        except VTTError as e:
            logger.error(f"{args.input}: {e}")
            return 1

        for cue in vtt.cues:
            print(self._format_cue(cue))
            print()

        print(f"{len(vtt.cues)} cues, {TimeConverter.format_duration(vtt.get_total_duration())}")
        speakers = vtt.speakers()
        if speakers:
            print(f"Speakers: {', '.join(speakers)}")
        return 0

    @staticmethod
    def _format_cue(cue: Cue) -> str:
        """Render one cue as a header line plus one line per voice."""
        header = cue.format_time_range()
        if cue.id:
            header = f"[{cue.id}] {header}"
        lines = [header]
        for voice in cue.voices:
            if voice.speaker:
                lines.append(f"  {voice.speaker}: {voice.text}")
            else:
                lines.append(f"  {voice.text}")
        return '\n'.join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    load_dotenv()

    cli = CLIHandler()
    parser = cli.create_parser()
    args = parser.parse_args(argv)

    exit_code = cli.handle_command(args)
    if argv is None:
        sys.exit(exit_code)
    return exit_code


if __name__ == '__main__':
    main()
