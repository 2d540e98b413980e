"""
cli.py - command line interface for the spell checker
Features:
- check a text file: unknown tokens with their top corrections
- suggest corrections for a single word
- interactive loop: every line is analysed as a document with the cursor at the end
- bench: BK-tree search against a linear scan over the same dictionary
- Uses Rich for tables and formatting
"""

import argparse
import logging
import random
import shlex
import sys
import time
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt
from rich import box
from rich.markup import escape

from spellcheck_assistant.core.bktree import linear_search
from spellcheck_assistant.core.spell_checker import ServiceState, SpellCheckService
from spellcheck_assistant.utils.config_manager import Config
from spellcheck_assistant.utils.logger_utils import setup_logging
from spellcheck_assistant.utils.metrics_tracker import Metrics

EXIT_OK = 0
EXIT_BAD_INPUT = 1
EXIT_UNAVAILABLE = 2

# initialise console for rich output
console = Console()


def build_service(cfg: Config) -> SpellCheckService:
    return SpellCheckService(
        tolerance=cfg.get("tolerance"),
        neighbor_radius=cfg.get("neighbor_radius"),
        max_suggestions=cfg.get("max_suggestions"),
        min_token_length=cfg.get("min_token_length"),
    )


class CLI:
    """Interactive spell checking session over a loaded dictionary."""

    def __init__(self, service: SpellCheckService, cfg: Config, out: Optional[Console] = None):
        self.service = service
        self.cfg = cfg
        self.console = out or console
        self.metrics = Metrics()
        self.running = True

    def run(self):
        """
        Main interactive loop:
        - Prompts for a line of text.
        - Handles commands like /quit, /tolerance.
        - Analyses everything else with the cursor at end of line.
        """
        self.console.rule("[bold magenta]Spell Checker[/bold magenta]")
        self.console.print("Commands: /tolerance <n> /stats /config [key val] /quit\n")

        while self.running:
            try:
                line = Prompt.ask("[green]Text[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                self.running = False
                break
            if not line:
                continue
            if line.startswith("/"):
                self.handle_command(line)
                continue
            self.analyse(line)

    # COMMAND HANDLING -----------------------------------------------------------
    def handle_command(self, line: str):
        p = shlex.split(line)
        if not p:
            return
        c = p[0].lower()

        if c in ("/q", "/quit", "/exit"):
            self.running = False
            return

        if c == "/tolerance" and len(p) > 1:
            try:
                self.service.set_tolerance(int(p[1]))
            except ValueError:
                self.console.print("[red]tolerance must be an integer[/red]")
                return
            self.console.print(f"tolerance = {self.service.tolerance}")
            return

        if c == "/stats":
            self.show_stats()
            return

        if c == "/config":
            if len(p) == 1:
                self.show_config()
            elif len(p) == 3:
                try:
                    self.cfg.set(p[1], p[2])
                except (KeyError, TypeError, ValueError) as e:
                    self.console.print(f"[red]{e}[/red]")
                    return
                self.apply_config()
            else:
                self.console.print("usage: /config [key val]")
            return

        self.console.print(f"[red]Unknown command:[/red] {line}")

    def apply_config(self):
        """Push tunables from the config into the live service."""
        self.service.set_tolerance(self.cfg.get("tolerance"))
        self.service.neighbor_radius = self.cfg.get("neighbor_radius")
        self.service.max_suggestions = self.cfg.get("max_suggestions")
        self.service.min_token_length = self.cfg.get("min_token_length")

    # CORE INPUT PROCESSING ---------------------------------------------------------------
    def analyse(self, text: str):
        t0 = time.perf_counter()
        report = self.service.update(text, len(text))
        self.metrics.record("update_time", time.perf_counter() - t0)

        if not report.context.available:
            self.console.print("[red]dictionary unavailable[/red]")
            return

        ctx = report.context
        if ctx.current_token:
            if ctx.is_known:
                self.console.print(f"[green]'{ctx.current_token}' is spelled correctly[/green]")
            else:
                self.console.print(f"[red]'{ctx.current_token}' not found in dictionary[/red]")
            if ctx.suggestions:
                title = "Suggestions" if not ctx.is_known else "Near neighbours"
                self.console.print(suggestion_table(ctx.suggestions, title))
        if report.error_count:
            n = report.error_count
            self.console.print(f"[yellow]{n} error{'s' if n != 1 else ''}:[/yellow] " + ", ".join(report.unknown))

    # DISPLAY -------------------------------------------------------------------------------
    def show_stats(self):
        table = Table(title="Stats", box=box.MINIMAL)
        table.add_column("Metric", style="cyan")
        table.add_column("Value")
        for k, v in self.service.stats().items():
            table.add_row(k, str(v))
        for k, (count, avg) in self.metrics.summary().items():
            table.add_row(k, f"{avg * 1000:.2f} ms avg over {count}")
        self.console.print(table)

    def show_config(self):
        lines = [f"{k:16} = {v}" for k, v in self.cfg.items()]
        self.console.print(Panel("\n".join(lines), title="Config", border_style="cyan"))


def suggestion_table(suggestions, title: str = "Suggestions") -> Table:
    """Ranked (word, distance) rows; distance 1 highlighted."""
    table = Table(title=title, box=box.SIMPLE, show_edge=False)
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Word", style="bold")
    table.add_column("Distance", justify="right", style="magenta")
    for i, s in enumerate(suggestions, 1):
        style = "green" if s.distance == 1 else None
        table.add_row(str(i), s.word, str(s.distance), style=style)
    return table


# SUBCOMMANDS -------------------------------------------------------------------
def cmd_check(service: SpellCheckService, args, out: Console) -> int:
    try:
        with open(args.file, "r", encoding="utf8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        out.print(f"[red]cannot read {escape(args.file)}:[/red] {escape(str(e))}")
        return EXIT_BAD_INPUT
    unknown = service.find_unknown_tokens(text)
    if not unknown.available:
        out.print("[red]dictionary unavailable[/red]")
        return EXIT_UNAVAILABLE

    table = Table(title=f"Unknown tokens in {args.file}", box=box.SIMPLE)
    table.add_column("Token", style="red")
    table.add_column("Suggestions")
    for tok in unknown:
        ctx = service.analyze_cursor_context(tok, len(tok), args.tolerance)
        top = ", ".join(f"{s.word} ({s.distance})" for s in ctx.suggestions[: args.top])
        table.add_row(tok, top or "-")
    out.print(table)
    out.print(f"{len(unknown)} unknown token(s)")
    return EXIT_OK


def cmd_suggest(service: SpellCheckService, args, out: Console) -> int:
    ctx = service.analyze_cursor_context(args.word, len(args.word), args.tolerance)
    if not ctx.available:
        out.print("[red]dictionary unavailable[/red]")
        return EXIT_UNAVAILABLE
    state = "known" if ctx.is_known else "unknown"
    out.print(f"'{ctx.current_token}' is {state}")
    out.print(suggestion_table(ctx.suggestions))
    return EXIT_OK


def cmd_bench(service: SpellCheckService, args, out: Console) -> int:
    """Time BK-tree search against linear scan on random dictionary words."""
    if not service.ready:
        out.print("[red]dictionary unavailable[/red]")
        return EXIT_UNAVAILABLE
    words = service.vocabulary()
    if not words:
        out.print("dictionary is empty")
        return EXIT_OK
    rng = random.Random(args.seed)
    queries = [rng.choice(words) for _ in range(args.queries)]
    tol = service.tolerance

    t0 = time.perf_counter()
    tree_hits = [service.suggest(q, tol, limit=len(words)) for q in queries]
    t_tree = time.perf_counter() - t0

    t0 = time.perf_counter()
    scan_hits = [linear_search(words, q, tol, limit=None) for q in queries]
    t_scan = time.perf_counter() - t0

    table = Table(title="BK-tree vs linear scan", box=box.MINIMAL)
    table.add_column("Method", style="cyan")
    table.add_column("Avg per query", justify="right")
    table.add_row("bk-tree", f"{t_tree / len(queries) * 1000:.3f} ms")
    table.add_row("linear", f"{t_scan / len(queries) * 1000:.3f} ms")
    out.print(table)
    if tree_hits != scan_hits:
        out.print("[red]result mismatch between bk-tree and linear scan[/red]")
        return 1
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="spellcheck-assistant", description="BK-tree spell checker")
    parser.add_argument("--config", help="JSON config file", default=None)
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    def with_dict(p):
        p.add_argument("--dict", dest="dictionary", help="word list, one word per line")
        p.add_argument("--tolerance", type=int, default=None)
        return p

    p = with_dict(sub.add_parser("check", help="list unknown tokens in a file"))
    p.add_argument("file")
    p.add_argument("--top", type=int, default=3, help="suggestions shown per token")

    p = with_dict(sub.add_parser("suggest", help="rank corrections for one word"))
    p.add_argument("word")

    with_dict(sub.add_parser("interactive", help="interactive checking loop"))

    p = with_dict(sub.add_parser("bench", help="bk-tree vs linear scan timing"))
    p.add_argument("--queries", type=int, default=200)
    p.add_argument("--seed", type=int, default=0)
    return parser


def main(argv: Optional[List[str]] = None, out: Optional[Console] = None) -> int:
    out = out or console
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    cfg = Config(args.config)
    service = build_service(cfg)
    if args.tolerance is not None and args.command in ("interactive", "bench"):
        service.set_tolerance(args.tolerance)

    path = args.dictionary or cfg.get("dictionary_path")
    if not path:
        service.mark_failed("no dictionary given (use --dict or dictionary_path)")
    else:
        service.load_word_file(path)
    if service.state is ServiceState.FAILED:
        out.print(f"[red]dictionary unavailable:[/red] {service.failure_reason}")
        return EXIT_UNAVAILABLE

    if args.command == "check":
        return cmd_check(service, args, out)
    if args.command == "suggest":
        return cmd_suggest(service, args, out)
    if args.command == "bench":
        return cmd_bench(service, args, out)
    CLI(service, cfg, out).run()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
