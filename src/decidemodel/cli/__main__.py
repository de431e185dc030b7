from __future__ import annotations

import argparse
import sys

from decidemodel.cli import ask
from decidemodel.config.settings import load_config
from decidemodel.errors import ConfigError, InputError
from decidemodel.features.answers import parse_answer
from decidemodel.models.signals import Answers
from decidemodel.state.evaluator import evaluate


def die(msg: str, code: int = 1) -> None:
    print(f"ERROR: {msg}", file=sys.stderr)
    sys.exit(code)


def _cmd_ask(args: argparse.Namespace) -> None:
    ask.run(config_path=args.config, strict=args.strict, send=args.notify)


def _cmd_evaluate(args: argparse.Namespace) -> None:
    cfg = load_config(args.config)
    values = [parse_answer(v, strict=args.strict) for v in args.answers]
    result = evaluate(Answers.from_list(values), cfg)
    ask.report(result, as_json=args.json, send=args.notify)


def _add_common(p: argparse.ArgumentParser, top: bool = False) -> None:
    # Subcommand copies must not overwrite flags given before the subcommand.
    config_default = None if top else argparse.SUPPRESS
    flag_default = False if top else argparse.SUPPRESS

    p.add_argument("--config", default=config_default, help="YAML file overriding weights/thresholds")
    p.add_argument("--strict", action="store_true", default=flag_default, help="Reject answers outside 0..2")
    p.add_argument(
        "--notify",
        action="store_true",
        default=flag_default,
        help="Post the recommendation to SLACK_WEBHOOK_URL",
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="decidemodel")
    _add_common(p, top=True)
    p.set_defaults(func=_cmd_ask)
    sub = p.add_subparsers(dest="cmd")

    p_ask = sub.add_parser("ask", help="Answer the five questions interactively")
    _add_common(p_ask)
    p_ask.set_defaults(func=_cmd_ask)

    p_eval = sub.add_parser("evaluate", help="Evaluate five answers given on the command line")
    _add_common(p_eval)
    p_eval.add_argument(
        "--answers",
        nargs=5,
        required=True,
        metavar=("Q1", "Q2", "Q3", "Q4", "Q5"),
    )
    p_eval.add_argument("--json", action="store_true", help="Print the full result as JSON")
    p_eval.set_defaults(func=_cmd_evaluate)

    return p


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    try:
        args.func(args)
    except (InputError, ConfigError) as e:
        die(str(e))


if __name__ == "__main__":
    main()
