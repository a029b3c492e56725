"""
cli.py - command runner for the trie predictor
Commands, one per line, read from a command file or typed at the prompt:
- "!"            list every word of the corpus with its count
- "@ <word> <n>" print <word> followed by up to n predicted words
- anything else  look the word up and list the words that followed it
Uses Rich for output, the debug tree view and the interactive prompt.
"""

import argparse
import sys
import time
from typing import Optional

from rich.console import Console
from rich.prompt import Prompt
from rich.text import Text
from rich.tree import Tree

from trie_predictor.core.errors import UnreadableSourceError
from trie_predictor.core.markov_predictor import MarkovPredictor
from trie_predictor.core.trie import TrieNode
from trie_predictor.utils.config_manager import Config
from trie_predictor.utils.logger_utils import log

# soft_wrap keeps long prediction chains on one line when output is piped
console = Console(highlight=False, soft_wrap=True)

INVALID_STRING = "(INVALID STRING)"
EMPTY = "(EMPTY)"
INVALID_COMMAND = "(INVALID COMMAND)"


class CommandRunner:
    """Runs dump/predict/lookup commands against a trained MarkovPredictor."""

    def __init__(
        self,
        model: MarkovPredictor,
        out: Optional[Console] = None,
        show_timing: bool = False,
    ):
        self.model = model
        self.console = out or console
        self.show_timing = show_timing

    # COMMAND HANDLING -----------------------------------------------------------
    def run_line(self, line: str) -> None:
        """Dispatch a single command line. Blank lines are ignored."""
        cmd = line.strip()
        if not cmd:
            return

        t0 = time.perf_counter()
        if cmd.startswith("!"):
            self.dump()
        elif cmd.startswith("@"):
            self.predict_command(cmd[1:])
        else:
            self.lookup_command(cmd)

        if self.show_timing:
            dt = (time.perf_counter() - t0) * 1000
            self.console.print(Text(f"({dt:.2f} ms)", style="dim"))

    def run_file(self, path: str, encoding: str = "utf-8") -> int:
        """
        Run every command in `path`. Returns the number of non-blank lines.
        Raises UnreadableSourceError when the file cannot be read.
        """
        log.info(f"running commands from {path}")
        try:
            with open(path, "r", encoding=encoding) as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            log.error(f"command file {path} unreadable: {e}")
            raise UnreadableSourceError(path, str(e)) from e

        ran = 0
        with log.time_block("commands"):
            for line in lines:
                if line.strip():
                    self.run_line(line)
                    ran += 1
        log.info(f"ran {ran} commands from {path}")
        return ran

    # COMMANDS -------------------------------------------------------------------
    def dump(self) -> None:
        """Every word in the main trie as "word (count)", alphabetically."""
        for word, count in self.model.words():
            self.console.print(Text(f"{word} ({count})"))

    def predict_command(self, args: str) -> None:
        """Handle "@ <word> <n>"."""
        parts = args.split()
        if len(parts) != 2 or not parts[1].isdigit():
            log.warning(f"malformed predict command: @{args}")
            self.console.print(Text(f"@{args.rstrip()}"))
            self.console.print(Text(INVALID_COMMAND, style="red"))
            return

        seed, steps = parts[0], int(parts[1])
        words = self.model.predict(seed, steps)
        line = Text(seed)
        for w in words:
            line.append(" ")
            line.append(w, style="green")
        self.console.print(line)

    def lookup_command(self, word: str) -> None:
        """Echo the word, then its followers or a not-found marker."""
        self.console.print(Text(word, style="bold"))
        res = self.model.lookup(word)
        if res is None:
            self.console.print(Text(INVALID_STRING, style="red"))
            return
        if not res.follows:
            self.console.print(Text(EMPTY, style="yellow"))
            return
        for w, c in res.follows:
            self.console.print(Text(f"- {w} ({c})"))


# DISPLAY -------------------------------------------------------------------------------
def render_tree(root: TrieNode, label: str = "root") -> Tree:
    """
    Raw structure dump: every node with its letter and count, and each
    follow trie as a nested branch under the word it belongs to.
    """
    tree = Tree(Text(f"{label} (children: {root.child_count()})", style="bold magenta"))
    stack = [(tree, root)]
    while stack:
        branch, node = stack.pop()
        for ch in sorted(node.children):
            child = node.children[ch]
            text = Text(ch, style="cyan")
            if child.count:
                text.append(f" ({child.count})", style="green")
            sub = branch.add(text)
            if child.follow is not None:
                follow = sub.add(Text("follow", style="yellow"))
                stack.append((follow, child.follow))
            stack.append((sub, child))
    return tree


# INTERACTIVE ---------------------------------------------------------------------------
def interactive(runner: CommandRunner, prompt: str = ">>", cfg: Optional[Config] = None) -> None:
    """Read commands from the prompt until /quit or EOF."""
    out = runner.console
    out.rule("[bold magenta]Trie Predictor[/bold magenta]")
    out.print("[cyan]Commands:[/cyan] !  |  @ <word> <n>  |  <word>  |  /config  |  /help  |  /quit")
    while True:
        try:
            line = Prompt.ask(f"[green]{prompt}[/green]", default="", console=out)
        except (EOFError, KeyboardInterrupt):
            out.print("\nbye.")
            break
        cmd = line.strip()
        if cmd in ("/q", "/quit", "/exit"):
            out.print("bye.")
            break
        if cmd == "/help":
            out.print("!            list all words with counts")
            out.print("@ word n     predict n words after word")
            out.print("word         show the words that followed word")
            out.print("/config      show the current settings")
            continue
        if cmd == "/config":
            if cfg is None:
                out.print("[dim](no config loaded)[/dim]")
            else:
                cfg.show(out)
            continue
        runner.run_line(cmd)


# ENTRY POINT ---------------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="trie-predictor",
        description="Word prediction from a corpus using a trie of follow tries.",
    )
    p.add_argument("corpus", help="training text, one phrase per line")
    p.add_argument("commands", nargs="?", help="command file; omit for an interactive prompt")
    p.add_argument("--config", default="config.json", help="JSON config file (created if missing)")
    p.add_argument("--tree", action="store_true", help="print the raw trie structure after building")
    p.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default=None)
    p.add_argument("--echo-log", action="store_true", help="also print log lines to stderr")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    log.configure(
        path=cfg["log_path"] or None,
        level=args.log_level or cfg["log_level"],
        echo=args.echo_log or cfg["echo_log"],
    )

    model = MarkovPredictor()
    try:
        model.train_file(args.corpus, encoding=cfg["encoding"])
    except UnreadableSourceError as e:
        console.print(Text(f"Error: {e}", style="bold red"))
        return 1

    if args.tree:
        console.print(render_tree(model.root))

    runner = CommandRunner(model, out=console, show_timing=cfg["show_timing"])
    if args.commands:
        try:
            runner.run_file(args.commands, encoding=cfg["encoding"])
        except UnreadableSourceError as e:
            console.print(Text(f"Error: {e}", style="bold red"))
            return 1
    else:
        interactive(runner, prompt=cfg["prompt"], cfg=cfg)
    return 0


if __name__ == "__main__":
    sys.exit(main())
