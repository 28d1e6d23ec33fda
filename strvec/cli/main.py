"""Main CLI entry point for strvec"""

import sys
import json
import argparse
import subprocess
from pathlib import Path
from typing import List, Optional

import yaml

from strvec.core.strvec import StrVec
from strvec.core.growth import GrowthPolicy
from strvec.core.growth_logger import GrowthLogger


def build_argv(command: Optional[str],
               extra_args: Optional[List[str]] = None,
               formatted: Optional[List[List[str]]] = None,
               policy: Optional[GrowthPolicy] = None,
               logger: Optional[GrowthLogger] = None) -> List[Optional[str]]:
    """Assemble a None-terminated argv

    Args:
        command: Command text split on whitespace (no quote handling)
        extra_args: Arguments appended verbatim after the split command
        formatted: [fmt, value] pairs pushed printf-style
        policy: Growth policy for the vector
        logger: Optional growth logger

    Returns:
        Detached argv list, last slot None
    """
    vec = StrVec(policy=policy, logger=logger)
    if command:
        vec.split(command)
    vec.pushv(extra_args or [])
    for fmt, value in formatted or []:
        vec.pushf(fmt, value)
    return vec.detach()


def run_argv(argv: List[Optional[str]]) -> int:
    """Run a detached argv and return the child's exit code

    Args:
        argv: None-terminated argument vector

    Returns:
        Process return code
    """
    args = argv[:argv.index(None)]
    if not args:
        raise ValueError("argv is empty, nothing to run")
    return subprocess.run(args, check=False).returncode


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description='strvec - build argument vectors for process invocation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the argv as JSON
  strvec "git log  --oneline"
  strvec "cc -o out" --arg "my file.c"
  strvec "make" --argf "JOBS=%s" 4

  # Run it
  strvec "ls -l" --exec

  # Tune growth
  strvec "echo a b c" --growth min_alloc=4 --verbose
  strvec "echo a b c" --config strvec.yaml
        """
    )

    parser.add_argument('command', nargs='?', default=None,
                        help='Command text, split on whitespace')
    parser.add_argument(
        '--arg', action='append', default=[], metavar='ARG',
        help='Append ARG verbatim (repeatable)'
    )
    parser.add_argument(
        '--argf', action='append', nargs=2, default=[], metavar=('FMT', 'VALUE'),
        help='Append FMT %% VALUE (repeatable)'
    )
    parser.add_argument(
        '--config', type=Path,
        help='YAML config file with a growth: section'
    )
    parser.add_argument(
        '--growth', action='append', default=[], metavar='KEY=VALUE',
        help='Override a growth policy field (repeatable)'
    )
    parser.add_argument(
        '--exec', action='store_true', dest='execute',
        help='Run the command instead of printing it'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Print growth summary to stderr'
    )

    args = parser.parse_args(argv)

    try:
        if args.config is not None:
            if not args.config.exists():
                raise FileNotFoundError(f"Config file not found: {args.config}")
            policy = GrowthPolicy.from_yaml(args.config)
        else:
            policy = GrowthPolicy()
        policy = policy.with_specs(args.growth)

        logger = GrowthLogger() if args.verbose else None
        result = build_argv(args.command, args.arg, args.argf, policy, logger)

        if logger is not None:
            print(logger.print_summary(), file=sys.stderr)

        if args.execute:
            sys.exit(run_argv(result))

        print(json.dumps(result[:-1]))

    except yaml.YAMLError as e:
        print(f"Error: Invalid config file {args.config}: {e}", file=sys.stderr)
        sys.exit(1)
    except PermissionError as e:
        print(f"Error: Permission denied: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except (ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
