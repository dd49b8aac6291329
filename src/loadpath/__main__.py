"""CLI entry point: run `loadpath file.lps` or `python -m loadpath file.lps`."""

import logging
import sys
from pathlib import Path


def main(argv=None) -> int:
    import argparse
    from .runtime.runtime import ScriptRuntime
    from .shared.errors import LoadpathError

    parser = argparse.ArgumentParser(prog="loadpath", description="Run a loadpath (.lps) script.")
    parser.add_argument("file", type=Path, nargs="?", help="Path to .lps script")
    parser.add_argument("-I", "--lib-path", action="append", default=[], metavar="DIR",
                        help="Module search directory (repeatable; replaces the default search path)")
    parser.add_argument("-r", "--require", action="append", default=[], metavar="NAME",
                        help="Require a module before running the script (repeatable)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log module resolution")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    if args.file is None and not args.require:
        parser.print_usage(sys.stderr)
        return 1

    runtime = ScriptRuntime(search_paths=args.lib_path or None)

    try:
        for name in args.require:
            runtime.require_or_throw(name)

        if args.file is not None:
            path = args.file.resolve()
            if not path.is_file():
                sys.stderr.write(f"loadpath: error: not a file: {path}\n")
                return 1
            runtime.load_script(str(path))
    except LoadpathError as e:
        sys.stderr.write(f"loadpath: error: {e}\n")
        return 1
    except OSError as e:
        sys.stderr.write(f"loadpath: error: could not read file: {e}\n")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
