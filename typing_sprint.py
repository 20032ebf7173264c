from __future__ import annotations

import argparse
import json
import logging
import os
import random
import signal
import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

try:
    import editdistance
    from rich.console import Console
    from rich.control import Control
    from rich.logging import RichHandler
    from rich.text import Text
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.containers import Container
    from textual.logging import TextualHandler
    from textual.widgets import Input, Static
except ModuleNotFoundError as exc:
    missing = getattr(exc, "name", "")
    hint = "python3 -m pip install -U rich textual editdistance"
    print(f"Missing dependency '{missing}'. Install with: {hint}")
    raise SystemExit(1) from exc


logger = logging.getLogger("typing_sprint")

DEFAULT_SCORES_PATH = Path("scores.json")
CONFIG_PATH = Path(__file__).resolve().parent / "typing_sprint.config.json"

PREFIX = "> "
BANNER = "Type the following text as quickly as you can!"
CONTINUE_HINT = "Press Enter to type another text or Ctrl+C to abort"
FIRST_ROUND_HINT = "Keep playing to see text-specific scores and records!"


class TypingSprintError(Exception):
    """Base class for errors raised by the game."""


class ScoreStoreError(TypingSprintError):
    """The score file could not be written."""


class SessionError(TypingSprintError):
    """A session operation was called in the wrong phase."""


class SessionInterrupted(TypingSprintError):
    """Raised from a signal handler to stop the console loop."""


# ---------------------------
# Text corpus
# ---------------------------

TEXTS: Tuple[str, ...] = (
    "I can eat glass and it doesn't hurt me.",
    "Don't communicate by sharing memory, share memory by communicating.",
    "If a program is too slow, it must have a loop.",
    "Hello, world.",
    # https://tour.golang.org/
    "Go provides concurrency features as part of the core language.",
    "A function can take zero or more arguments.",
    "A function can return any number of results.",
    "A struct is a collection of fields.",
    "Struct fields are accessed using a dot.",
    "Go's return values may be named.",
    "A var statement can be at package or function level.",
    "A map maps keys to values.",
)


def build_corpus(extra_texts: Sequence[str] = ()) -> Tuple[str, ...]:
    """Built-in texts followed by configured extras, blanks and duplicates dropped."""
    corpus: List[str] = []
    for text in list(TEXTS) + list(extra_texts):
        text = text.strip()
        if text and text not in corpus:
            corpus.append(text)
    return tuple(corpus)


# ---------------------------
# Config
# ---------------------------

@dataclass
class Settings:
    theme: str = "slate"
    scores_path: Path = DEFAULT_SCORES_PATH
    extra_texts: List[str] = field(default_factory=list)
    log_file: Optional[Path] = None
    log_level: str = "WARNING"


def load_config(path: Path = CONFIG_PATH) -> Dict[str, object]:
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring config %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def settings_from_config(config: Dict[str, object]) -> Settings:
    settings = Settings()
    theme = config.get("theme")
    if isinstance(theme, str) and theme in THEMES:
        settings.theme = theme
    scores_path = config.get("scores_path")
    if isinstance(scores_path, str) and scores_path:
        settings.scores_path = Path(scores_path).expanduser()
    extra = config.get("extra_texts")
    if isinstance(extra, list):
        settings.extra_texts = [t for t in extra if isinstance(t, str)]
    log_file = config.get("log_file")
    if isinstance(log_file, str) and log_file:
        settings.log_file = Path(log_file).expanduser()
    level = config.get("log_level")
    if isinstance(level, str) and level.upper() in logging.getLevelNamesMapping():
        settings.log_level = level.upper()
    return settings


def configure_logging(settings: Settings, handler: logging.Handler) -> None:
    logger.handlers.clear()
    logger.setLevel(settings.log_level)
    logger.propagate = False
    logger.addHandler(handler)
    if settings.log_file is not None:
        try:
            settings.log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        except OSError as exc:
            logger.warning("Not logging to %s: %s", settings.log_file, exc)
            return
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)


# ---------------------------
# Persistence helpers
# ---------------------------

class ScoreStore:
    """Best score per text, kept in a JSON object keyed by the literal text."""

    def __init__(self, path: Path = DEFAULT_SCORES_PATH) -> None:
        self.path = Path(path)
        self.scores: Dict[str, int] = {}
        self.load_error: Optional[str] = None

    def load(self) -> Dict[str, int]:
        self.scores = {}
        self.load_error = None
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return self.scores
        except UnicodeDecodeError as exc:
            return self._corrupt(f"not UTF-8 text ({exc.reason})")
        except OSError as exc:
            logger.warning("Could not read %s, starting with no scores: %s", self.path, exc)
            return self.scores

        try:
            data = json.loads(raw)
        except ValueError as exc:
            return self._corrupt(str(exc))
        if not isinstance(data, dict):
            return self._corrupt("expected a JSON object")

        for text, score in data.items():
            # bool is an int subclass; reject it explicitly
            if isinstance(score, int) and not isinstance(score, bool):
                self.scores[text] = score
            else:
                logger.warning("Dropping non-integer score for %r in %s", text, self.path)
        logger.debug("Loaded %d scores from %s", len(self.scores), self.path)
        return self.scores

    def _corrupt(self, reason: str) -> Dict[str, int]:
        self.load_error = f"{self.path} is corrupt ({reason}); starting with no scores"
        logger.warning("%s", self.load_error)
        self.scores = {}
        return self.scores

    def save(self) -> None:
        try:
            payload = json.dumps(self.scores, indent=2, sort_keys=True, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise ScoreStoreError(f"could not serialize scores: {exc}") from exc
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload + "\n", encoding="utf-8")
            os.chmod(self.path, 0o644)
        except OSError as exc:
            raise ScoreStoreError(f"could not write {self.path}: {exc}") from exc
        logger.info("Saved %d scores to %s", len(self.scores), self.path)

    def best(self, text: str) -> int:
        return self.scores.get(text, 0)

    def record(self, text: str, score: int) -> bool:
        """
        Fold a round score into the store. Returns True only when an existing
        best was beaten; the first play of a text just seeds its entry.
        """
        if text not in self.scores:
            self.scores[text] = score
            return False
        if score > self.scores[text]:
            self.scores[text] = score
            return True
        return False


# ---------------------------
# Text selection
# ---------------------------

class TextSelector:
    """Uniform random index that never repeats the previous pick (when it can)."""

    def __init__(self, rng: Optional[random.Random] = None, max_attempts: int = 64) -> None:
        self.rng = rng or random.Random()
        self.max_attempts = max(1, max_attempts)
        self.last_index: Optional[int] = None

    def pick_next(self, size: int) -> int:
        if size < 1:
            raise ValueError("cannot pick from an empty corpus")
        index = self.rng.randrange(size)
        if size > 1:
            attempts = 1
            while index == self.last_index and attempts < self.max_attempts:
                index = self.rng.randrange(size)
                attempts += 1
            if index == self.last_index:
                logger.debug("Accepting repeat of index %d after %d draws", index, attempts)
        self.last_index = index
        return index

    def pick(self, texts: Sequence[str]) -> str:
        return texts[self.pick_next(len(texts))]


# ---------------------------
# Typing math
# ---------------------------

MAX_DISTANCE = 10
POINTS_PER_CHAR = 100


def edit_distance(typed: str, target: str) -> int:
    return editdistance.eval(typed.strip(), target.strip())


def score_from_distance(distance: int) -> int:
    return max(0, MAX_DISTANCE - distance) * POINTS_PER_CHAR


def pluralize(word: str, n: int) -> str:
    return word if n == 1 else word + "s"


def format_elapsed(seconds: float) -> str:
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes, rest = divmod(seconds, 60)
    return f"{int(minutes)}m{rest:05.2f}s"


@dataclass(frozen=True)
class RoundResult:
    elapsed: float
    distance: int
    score: int

    @property
    def perfect(self) -> bool:
        return self.distance == 0


@dataclass(frozen=True)
class RoundOutcome:
    text: str
    result: RoundResult
    new_highscore: bool
    first_round: bool


def result_lines(result: RoundResult) -> List[str]:
    lines = [f"Finished in {format_elapsed(result.elapsed)}!"]
    if result.perfect:
        lines.append(f"Perfect Score - {result.score}")
        return lines
    lines.append(f"Off by {result.distance} {pluralize('character', result.distance)}")
    lines.append("No score" if result.score == 0 else f"Score: {result.score}")
    return lines


# ---------------------------
# Session
# ---------------------------

class Phase(Enum):
    COUNTDOWN = "countdown"
    PROMPTING = "prompting"
    AWAITING_INPUT = "awaiting input"
    REPORTING = "reporting"
    CONTINUE = "continue"
    CLOSED = "closed"


class TypingSession:
    """
    Round bookkeeping shared by the console loop and the Textual app.

    The front end owns the clock and the terminal; the session owns the
    corpus, the selector, the score store and the one shutdown routine that
    persists scores.
    """

    def __init__(
        self,
        texts: Sequence[str],
        store: ScoreStore,
        selector: Optional[TextSelector] = None,
        first_delay: float = 1.0,
        next_delay: float = 0.75,
    ) -> None:
        if not texts:
            raise ValueError("a session needs at least one text")
        self.texts = tuple(texts)
        self.store = store
        self.selector = selector or TextSelector()
        self.first_delay = first_delay
        self.next_delay = next_delay

        self.phase = Phase.COUNTDOWN
        self.first_round = True
        self.rounds_played = 0
        self.current_text: Optional[str] = None
        self.last_outcome: Optional[RoundOutcome] = None
        self._started_at: Optional[float] = None
        self._shutdown_lock = threading.Lock()
        self._saved: Optional[bool] = None

    @property
    def closed(self) -> bool:
        return self.phase is Phase.CLOSED

    def countdown_delay(self) -> float:
        # ease the user in on the very first round
        return self.first_delay if self.first_round else self.next_delay

    def countdown_steps(self) -> List[str]:
        return ["3 ...", "2 ...", "1 ...", "Go!"]

    def next_text(self) -> str:
        self._expect(Phase.COUNTDOWN)
        self.current_text = self.selector.pick(self.texts)
        self.phase = Phase.PROMPTING
        return self.current_text

    def start_timer(self, now: float) -> None:
        self._expect(Phase.PROMPTING)
        self._started_at = now
        self.phase = Phase.AWAITING_INPUT

    def finish_round(self, typed: str, now: float) -> RoundOutcome:
        self._expect(Phase.AWAITING_INPUT)
        distance = edit_distance(typed, self.current_text)
        result = RoundResult(
            elapsed=max(0.0, now - self._started_at),
            distance=distance,
            score=score_from_distance(distance),
        )
        self.phase = Phase.REPORTING
        new_highscore = self.store.record(self.current_text, result.score)
        self.rounds_played += 1
        outcome = RoundOutcome(
            text=self.current_text,
            result=result,
            new_highscore=new_highscore,
            first_round=self.first_round,
        )
        self.last_outcome = outcome
        logger.debug(
            "Round %d: distance=%d score=%d elapsed=%.3f",
            self.rounds_played, distance, result.score, result.elapsed,
        )
        return outcome

    def prompt_continue(self) -> None:
        self._expect(Phase.REPORTING)
        self.phase = Phase.CONTINUE

    def continue_round(self) -> None:
        self._expect(Phase.CONTINUE)
        self.first_round = False
        self.current_text = None
        self._started_at = None
        self.phase = Phase.COUNTDOWN

    def shutdown(self) -> bool:
        """Persist scores exactly once and close the session. Returns whether the save worked."""
        with self._shutdown_lock:
            if self._saved is not None:
                return self._saved
            self.phase = Phase.CLOSED
            try:
                self.store.save()
            except ScoreStoreError as exc:
                logger.warning("Failed to save scores: %s", exc)
                self._saved = False
            else:
                self._saved = True
            return self._saved

    def _expect(self, phase: Phase) -> None:
        if self.phase is not phase:
            raise SessionError(f"expected phase {phase.value!r}, session is {self.phase.value!r}")


# ---------------------------
# Plain console mode
# ---------------------------

def farewell(session: TypingSession, console: Console) -> int:
    """Run the shutdown routine (a no-op if it already ran) and say goodbye."""
    if not session.shutdown():
        console.print("Failed to save scores")
    console.print("See you later!")
    return 0


def _raise_interrupt(signum, frame) -> None:
    raise SessionInterrupted(signal.Signals(signum).name)


class ConsoleSession:
    """Line-oriented game loop on a rich console."""

    def __init__(
        self,
        session: TypingSession,
        console: Optional[Console] = None,
        read_line: Optional[Callable[[str], str]] = None,
        sleep: Optional[Callable[[float], None]] = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.session = session
        self.console = console or Console(highlight=False)
        self.read_line = read_line or self.console.input
        self.sleep = sleep or time.sleep
        self.clock = clock

    def run(self) -> int:
        previous = self._install_signal_handlers()
        try:
            while True:
                self.play_round()
                self.console.print("\n" + CONTINUE_HINT)
                self.session.prompt_continue()
                self.read_line("")
                self.session.continue_round()
        except (KeyboardInterrupt, EOFError, SessionInterrupted) as exc:
            logger.debug("Stopping console loop: %s", type(exc).__name__)
            self.console.print()
        finally:
            self._restore_signal_handlers(previous)
        return self.shutdown()

    def play_round(self) -> RoundOutcome:
        self.console.print(BANNER)
        self.countdown()

        text = self.session.next_text()
        self.console.print(PREFIX + text, end="", markup=False)
        # the prompt is redrawn over the shown text
        self.console.control(Control.move_to_column(0))

        self.session.start_timer(self.clock())
        typed = self.read_line(PREFIX)
        outcome = self.session.finish_round(typed, self.clock())
        self.console.print()
        self.report(outcome)
        return outcome

    def countdown(self) -> None:
        delay = self.session.countdown_delay()
        *ticks, go = self.session.countdown_steps()
        for tick in ticks:
            self.console.print(tick)
            self.sleep(delay)
        self.console.print(go)
        self.console.print()

    def report(self, outcome: RoundOutcome) -> None:
        for line in result_lines(outcome.result):
            self.console.print(line)
        if outcome.new_highscore:
            self.console.print("NEW HIGHSCORE!")
        if outcome.first_round:
            self.console.print("\n" + FIRST_ROUND_HINT)

    def shutdown(self) -> int:
        return farewell(self.session, self.console)

    def _install_signal_handlers(self) -> Dict[int, object]:
        previous: Dict[int, object] = {}
        if threading.current_thread() is not threading.main_thread():
            return previous
        for name in ("SIGTERM", "SIGHUP"):
            signum = getattr(signal, name, None)
            if signum is not None:
                previous[signum] = signal.signal(signum, _raise_interrupt)
        return previous

    def _restore_signal_handlers(self, previous: Dict[int, object]) -> None:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


# ---------------------------
# Themes
# ---------------------------

THEMES: Dict[str, Dict[str, str]] = {
    "slate": {
        "card_bg": "#111827",
        "stats_bg": "#0f172a",
        "prompt_bg": "#0b1220",
        "input_bg": "#0b0f14",
        "border": "#1f2937",
        "title": "#e5e7eb",
        "muted": "#64748b",
        "hint": "#93c5fd",
        "ok": "#a7f3d0",
        "bad": "#fca5a5",
        "accent": "#60a5fa",
    },
    "ember": {
        "card_bg": "#1f140f",
        "stats_bg": "#21140e",
        "prompt_bg": "#1a1210",
        "input_bg": "#130c0a",
        "border": "#3b1d14",
        "title": "#fef3c7",
        "muted": "#d6a08a",
        "hint": "#fbbf24",
        "ok": "#fcd34d",
        "bad": "#f87171",
        "accent": "#f97316",
    },
    "mint": {
        "card_bg": "#0b1f24",
        "stats_bg": "#0b1c22",
        "prompt_bg": "#0a1b1f",
        "input_bg": "#07161a",
        "border": "#12323a",
        "title": "#d1fae5",
        "muted": "#7dd3c7",
        "hint": "#5eead4",
        "ok": "#a7f3d0",
        "bad": "#fb7185",
        "accent": "#34d399",
    },
}


# ---------------------------
# UI widgets
# ---------------------------

class BannerView(Static):
    """Instructions and countdown."""
    pass


class PromptView(Static):
    """The text to type."""
    pass


class ResultView(Static):
    """Report for the last round."""
    pass


class ScoreBar(Static):
    """Best score for the current text."""
    pass


class HelpBar(Static):
    """Help / controls."""
    pass


# ---------------------------
# App
# ---------------------------

class TypingSprint(App):
    CSS = """
    Screen {
        background: transparent;
    }

    #root {
        height: 100%;
        padding: 1 2;
    }

    BannerView, ScoreBar, HelpBar {
        border: round #1f2937;
        padding: 0 2;
        height: 3;
    }

    PromptView {
        border: round #1f2937;
        padding: 1 2;
        height: 5;
    }

    ResultView {
        border: round #1f2937;
        padding: 0 2;
        height: 1fr;
    }

    Input {
        border: round #1f2937;
        padding: 0 1;
        height: 3;
    }
    """

    TITLE = "Typing Sprint"

    BINDINGS = [
        Binding("ctrl+c", "abort", "Quit", priority=True),
        Binding("ctrl+q", "abort", "Quit", priority=True),
        Binding("ctrl+t", "cycle_theme", "Theme", priority=True),
    ]

    def __init__(self, session: TypingSession, theme_name: str = "slate") -> None:
        super().__init__()
        self.session = session
        self.palettes = THEMES.copy()
        self.theme_name = theme_name if theme_name in self.palettes else "slate"
        self.palette = self.palettes[self.theme_name]

    def compose(self) -> ComposeResult:
        with Container(id="root"):
            self.banner_view = BannerView()
            self.prompt_view = PromptView()
            self.input = Input(placeholder="")
            self.result_view = ResultView()
            self.score_bar = ScoreBar()
            self.help_bar = HelpBar()
            yield self.banner_view
            yield self.prompt_view
            yield self.input
            yield self.result_view
            yield self.score_bar
            yield self.help_bar

    def on_mount(self) -> None:
        self.apply_theme()
        self._render_help()
        self._render_scorebar()
        if self.session.store.load_error:
            self.notify(self.session.store.load_error, title="Scores", severity="warning")
        self.start_countdown()

    def apply_theme(self) -> None:
        palette = self.palette
        self.banner_view.styles.background = palette["card_bg"]
        self.prompt_view.styles.background = palette["prompt_bg"]
        self.input.styles.background = palette["input_bg"]
        self.result_view.styles.background = palette["stats_bg"]
        self.score_bar.styles.background = palette["card_bg"]
        self.help_bar.styles.background = palette["stats_bg"]
        border_def = (("round", palette["border"]),)
        for widget in (
            self.banner_view, self.prompt_view, self.input,
            self.result_view, self.score_bar, self.help_bar,
        ):
            widget.styles.border = border_def

    # -- round flow ---------------------------------------------------------

    def start_countdown(self) -> None:
        self.input.disabled = True
        self.input.value = ""
        self.input.placeholder = ""
        self.prompt_view.update("")
        self._countdown_step(self.session.countdown_steps(), 0)

    def _countdown_step(self, steps: List[str], i: int) -> None:
        if self.session.closed:
            return
        self._render_banner(steps[: i + 1])
        if i == len(steps) - 1:
            self._begin_prompt()
            return
        self.set_timer(self.session.countdown_delay(), lambda: self._countdown_step(steps, i + 1))

    def _begin_prompt(self) -> None:
        text = self.session.next_text()
        self.prompt_view.update(Text(PREFIX + text, style=f"bold {self.palette['title']}"))
        self.input.placeholder = text
        self.input.value = ""
        self.input.disabled = False
        self.input.focus()
        self._render_scorebar()
        self.session.start_timer(time.perf_counter())

    def on_input_submitted(self, event: Input.Submitted) -> None:
        phase = self.session.phase
        if phase is Phase.AWAITING_INPUT:
            outcome = self.session.finish_round(event.value, time.perf_counter())
            self._render_result(outcome)
            self._render_scorebar()
            self.session.prompt_continue()
            self.input.value = ""
            self.input.placeholder = CONTINUE_HINT
        elif phase is Phase.CONTINUE:
            self.session.continue_round()
            self.start_countdown()

    # -- actions ------------------------------------------------------------

    def action_abort(self) -> None:
        # the outcome is reported by farewell() once the screen is torn down
        self.session.shutdown()
        self.exit(0)

    def action_cycle_theme(self) -> None:
        names = list(self.palettes.keys())
        self.theme_name = names[(names.index(self.theme_name) + 1) % len(names)]
        self.palette = self.palettes[self.theme_name]
        self.apply_theme()
        self._render_help()
        self._render_scorebar()
        if self.session.last_outcome is not None:
            self._render_result(self.session.last_outcome)

    # -- rendering ----------------------------------------------------------

    def _render_banner(self, steps: List[str]) -> None:
        theme = self.palette
        text = Text()
        text.append(BANNER, style=f"bold {theme['title']}")
        text.append("   ", style="")
        text.append("  ".join(steps), style=theme["accent"])
        self.banner_view.update(text)

    def _render_result(self, outcome: RoundOutcome) -> None:
        theme = self.palette
        result = outcome.result
        lines = result_lines(result)
        text = Text()
        text.append(lines[0] + "\n", style=f"bold {theme['title']}")
        for line in lines[1:]:
            if result.perfect:
                style = f"bold {theme['ok']}"
            elif result.score == 0:
                style = theme["bad"]
            else:
                style = theme["title"]
            text.append(line + "\n", style=style)
        if outcome.new_highscore:
            text.append("NEW HIGHSCORE!\n", style=f"bold {theme['accent']}")
        if outcome.first_round:
            text.append("\n" + FIRST_ROUND_HINT + "\n", style=theme["hint"])
        self.result_view.update(text)

    def _render_scorebar(self) -> None:
        theme = self.palette
        store = self.session.store
        text = Text()
        current = self.session.current_text
        if current is not None and current in store.scores:
            text.append("Best for this text ", style=theme["muted"])
            text.append(str(store.best(current)), style=f"bold {theme['title']}")
        elif current is not None:
            text.append("First time typing this text", style=theme["muted"])
        else:
            text.append("Scores", style=f"bold {theme['title']}")
        text.append("  |  ", style=theme["muted"])
        scored = len(store.scores)
        text.append(f"{scored} {pluralize('text', scored)} scored", style=theme["muted"])
        text.append("  |  ", style=theme["muted"])
        text.append(str(store.path), style=theme["muted"])
        self.score_bar.update(text)

    def _render_help(self) -> None:
        theme = self.palette
        text = Text()
        text.append("Enter submit / next", style=theme["hint"])
        text.append("  ", style=theme["muted"])
        text.append("Ctrl+T theme", style=theme["hint"])
        text.append("  ", style=theme["muted"])
        text.append("Ctrl+C save & quit", style=theme["hint"])
        self.help_bar.update(text)


# ---------------------------
# Entry point
# ---------------------------

def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="typing-sprint",
        description="Retype a line of text as fast and as accurately as you can.",
    )
    parser.add_argument("--plain", action="store_true", help="line-based console mode instead of the TUI")
    parser.add_argument("--scores", type=Path, help="score file (default: ./scores.json)")
    parser.add_argument("--config", type=Path, default=CONFIG_PATH, help="JSON config file")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    settings = settings_from_config(load_config(args.config))
    if args.scores is not None:
        settings.scores_path = args.scores
    if args.log_level:
        settings.log_level = args.log_level

    store = ScoreStore(settings.scores_path)
    session = TypingSession(build_corpus(settings.extra_texts), store)

    if args.plain:
        console = Console(highlight=False)
        configure_logging(settings, RichHandler(console=console, show_time=False, show_path=False))
        store.load()
        return ConsoleSession(session, console).run()

    configure_logging(settings, TextualHandler())
    store.load()
    TypingSprint(session, theme_name=settings.theme).run()
    return farewell(session, Console(highlight=False))


if __name__ == "__main__":
    raise SystemExit(main())
