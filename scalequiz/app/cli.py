from __future__ import annotations

"""CLI for scalequiz using SessionManager and ScaleManager."""

import argparse
import sys
from typing import Any

from .. import __version__
from ..catalogue.difficulty import Difficulty
from ..catalogue.roots import roots_in_play
from ..catalogue.scale_manager import ScaleManager
from ..config.config import load_config, validate_config
from ..errors import ScaleQuizError
from ..results.persist import save_session_results
from ..theory.note import Note
from ..theory.realised_scale import RealisedScale
from ..theory.scale import Scale
from .session_manager import SessionManager


def _build_ui() -> dict[str, Any]:
    def ask(prompt: str) -> str:
        return input(prompt)

    def inform(msg: str) -> None:
        print(msg)

    def clear() -> None:
        print("\n" * 20, end="")

    return {"ask": ask, "inform": inform, "clear": clear}


def _add_catalogue_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--config", default=None, help="Path to YAML config")
    p.add_argument("-i", "--input", default=None, help="Path to the scales catalogue")


def _cmd_run(args: argparse.Namespace) -> int:
    if args.explain:
        from .explain import enable as explain_enable
        explain_enable(True)

    cfg = load_config(args.config)
    # CLI overrides before validation so they get the same checks
    if args.input is not None:
        cfg.setdefault("catalogue", {})["path"] = args.input
    session_cfg = cfg.setdefault("session", {})
    if args.questions is not None:
        session_cfg["questions"] = args.questions
    if args.difficulty is not None:
        session_cfg["difficulty"] = args.difficulty
    if args.choices is not None:
        session_cfg["choices"] = args.choices
    if args.output is not None:
        cfg.setdefault("results", {})["output_path"] = args.output
    cfg = validate_config(cfg)

    session_cfg = cfg["session"]
    sm = SessionManager(choices=int(session_cfg["choices"]))
    sm.load_scales(cfg["catalogue"]["path"])
    sm.generate_session(int(session_cfg["questions"]), Difficulty.from_label(session_cfg["difficulty"]))

    sm.run(_build_ui())

    out_path = save_session_results(sm.results(), cfg["results"]["output_path"])
    print("\nSession Summary:")
    print(sm.summary())
    print(f"Results written to {out_path}")
    return 0


def _cmd_list_scales(args: argparse.Namespace) -> int:
    cfg = validate_config(load_config(args.config))
    path = args.input or cfg["catalogue"]["path"]
    mgr = ScaleManager()
    mgr.load(path)
    wanted = args.difficulty
    for e in mgr.entries:
        if wanted is not None and e.difficulty > wanted:
            continue
        print(f"{e.name} [{e.difficulty.label}]: {e.scale}")
    if args.roots:
        level = wanted if wanted is not None else Difficulty.HARD
        print(f"Roots [{level.label}]: " + ", ".join(r.name() for r in roots_in_play(level)))
    return 0


def _cmd_realise(args: argparse.Namespace) -> int:
    root = Note.from_text(args.root)
    rs = RealisedScale(root, Scale.parse(args.scale))
    print(rs.display_string())
    if args.verbose:
        for note in rs:
            print(f"  {note}")
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="scalequiz")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    sub = p.add_subparsers(dest="cmd")

    rp = sub.add_parser("run", help="Run a quiz session")
    _add_catalogue_args(rp)
    rp.add_argument("-n", "--questions", type=int, default=None, help="Number of questions in this session")
    rp.add_argument("-o", "--output", default=None, help="Path to the results file (.csv or .parquet)")
    rp.add_argument("-d", "--difficulty", default=None, help="Question difficulty (0 = Easy, 1 = Medium, 2 = Hard)")
    rp.add_argument("--choices", type=int, default=None, help="Options shown per question")
    rp.add_argument("--explain", action="store_true")

    lp = sub.add_parser("list-scales", help="Print the scale catalogue")
    _add_catalogue_args(lp)
    lp.add_argument("-d", "--difficulty", type=Difficulty.coerce, default=None, help="Only scales at or below this difficulty")
    lp.add_argument("--roots", action="store_true", help="Also print the root notes used at that difficulty")

    rs = sub.add_parser("realise", help="Print a scale at a root, e.g. --root D4 --scale 1,2,3,4,5,6,7")
    rs.add_argument("--root", required=True)
    rs.add_argument("--scale", required=True)
    rs.add_argument("-v", "--verbose", action="store_true", help="Also print pitches")

    args = p.parse_args(argv)

    if args.version:
        print(f"scalequiz {__version__}")
        return 0
    if args.cmd is None:
        p.print_help()
        return 2

    handlers = {"run": _cmd_run, "list-scales": _cmd_list_scales, "realise": _cmd_realise}
    try:
        return handlers[args.cmd](args)
    except ScaleQuizError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
