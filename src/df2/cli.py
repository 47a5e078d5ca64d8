from __future__ import annotations
import argparse, json, logging, time

L = logging.getLogger("df2.cli")


def setup_logging(verbose: bool, log_level: str = ""):
    if verbose:
        level = logging.DEBUG
    else:
        level_map = {
            "debug": logging.DEBUG,
            "info": logging.INFO,
            "warning": logging.WARNING,
            "warn": logging.WARNING,
            "error": logging.ERROR,
            "critical": logging.CRITICAL,
        }
        level = level_map.get(str(log_level or "").strip().lower(), logging.WARNING)
    # UTC for all %(asctime)s timestamps.
    logging.Formatter.converter = time.gmtime
    logging.basicConfig(
        level=level, format="%(asctime)sZ [%(levelname)s] %(name)s: %(message)s", force=True
    )


def cmd_shot(args):
    from .binary.reader import Reader
    with Reader.from_path(args.input) as reader:
        reader.seek(args.number)
        shot = reader.read_one()
    if shot is None:
        L.error("shot %d is past the last shot in %s", args.number, args.input)
        return 1
    print(json.dumps(shot.model_dump(mode="json"), indent=args.indent))
    return 0

def cmd_summary(args):
    from .binary.reader import summarize_file
    shots, segments = summarize_file(args.input, max_shots=args.max_shots)
    print(f"Filename: {args.input}")
    print(f"Number of shots: {shots}")
    print(f"Number of echo segments: {segments}")
    return 0

def cmd_segment(args):
    from .binary.reader import read_segment
    seg = read_segment(args.input)
    out = seg.model_dump(mode="json")
    out["encoded_length"] = seg.encoded_length
    print(json.dumps(out, indent=args.indent))
    return 0

def cmd_plot(args):
    from .binary.reader import Reader
    from .viz import plot_shot
    with Reader.from_path(args.input) as reader:
        reader.seek(args.number)
        shot = reader.read_one()
    if shot is None:
        L.error("shot %d is past the last shot in %s", args.number, args.input)
        return 1
    plot_shot(shot)
    return 0

def build_parser():
    p = argparse.ArgumentParser(prog="df2", description="Query Optech df2 waveform files")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    p.add_argument("--log-level", default="", help="Override log level (debug/info/warning/error)")
    sub = p.add_subparsers(dest="cmd")

    sp = sub.add_parser("shot", help="print one shot as JSON")
    sp.add_argument("input", help="Path to .df2 file")
    sp.add_argument("number", type=int, help="Shot number (1-indexed)")
    sp.add_argument("--indent", type=int, default=None, help="Pretty-print JSON with this indent")
    sp.set_defaults(func=cmd_shot)

    sp = sub.add_parser("summary", help="count shots (decodes and validates every record)")
    sp.add_argument("input", help="Path to .df2 file")
    sp.add_argument("--max-shots", type=int, default=None, help="Stop after N shots")
    sp.set_defaults(func=cmd_summary)

    sp = sub.add_parser("segment", help="decode a standalone segment file as JSON")
    sp.add_argument("input", help="Path to a single-segment blob")
    sp.add_argument("--indent", type=int, default=None, help="Pretty-print JSON with this indent")
    sp.set_defaults(func=cmd_segment)

    sp = sub.add_parser("plot", help="plot one shot's waveforms")
    sp.add_argument("input", help="Path to .df2 file")
    sp.add_argument("number", type=int, help="Shot number (1-indexed)")
    sp.set_defaults(func=cmd_plot)

    return p

def main(argv=None):
    from .binary.errors import Df2Error

    p = build_parser()
    ns = p.parse_args(argv)
    setup_logging(ns.verbose, ns.log_level)
    if not hasattr(ns, "func"):
        p.print_help()
        return 2
    try:
        return ns.func(ns)
    except (Df2Error, OSError) as e:
        L.error("%s: %s", ns.input, e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
