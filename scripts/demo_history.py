"""Undo/redo history demo.

Builds a HistoryBuffer from config/default.yaml, types a short sentence
word by word, then walks back and forth through the history, branching
once to show that redo history is discarded.

Run:
    python scripts/demo_history.py
    python scripts/demo_history.py --capacity 3 --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
import sys

from undoredo.core.config import UndoRedoConfig
from undoredo.core.types import HistoryEvent
from undoredo.history.buffer import HistoryBuffer
from undoredo.history.config import HistoryConfig
from undoredo.utils.logging import setup_logging

logger = logging.getLogger("undoredo.demo")

SENTENCE = "the quick brown fox jumps over the lazy dog"


def _on_change(name: str):
    def callback(source, value):
        logger.info("%s -> %s (%d entries)", name, value, source.valid_count)

    return callback


def main() -> int:
    parser = argparse.ArgumentParser(
        prog="demo_history",
        description="Undo/redo history demo",
    )
    parser.add_argument("--config", "-c", default="config/default.yaml")
    parser.add_argument(
        "--capacity",
        type=int,
        default=None,
        help="Override history capacity (0 = unbounded)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument("--log-json", action="store_true", default=False)
    args = parser.parse_args()

    config = UndoRedoConfig(args.config)
    try:
        cfg = config.load(validate=True)
    except FileNotFoundError:
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: Config validation failed:\n{e}", file=sys.stderr)
        return 1

    if args.capacity is not None:
        config.override("undoredo.history.capacity", args.capacity)

    system = cfg.undoredo.system
    setup_logging(
        args.log_level or system.get("log_level", "INFO"),
        log_file=system.get("log_file", None),
        log_json=args.log_json or system.get("log_json", False),
    )

    history: HistoryBuffer[str] = HistoryBuffer.from_config(
        HistoryConfig.from_omegaconf(cfg.undoredo.history)
    )
    history.subscribe(HistoryEvent.CAN_UNDO_CHANGED, _on_change("can_undo"))
    history.subscribe(HistoryEvent.CAN_REDO_CHANGED, _on_change("can_redo"))

    text = ""
    for word in SENTENCE.split():
        text = f"{text} {word}".strip()
        history.try_insert(text)
    print(f"typed:   {history.current!r}")

    for _ in range(3):
        ok, value = history.try_undo()
        if not ok:
            break
        print(f"undo:    {value!r}")

    ok, value = history.try_redo()
    if ok:
        print(f"redo:    {value!r}")

    history.try_insert(f"{history.current} cat")
    print(f"branch:  {history.current!r}")
    print(f"can_redo={history.can_redo} entries={history.valid_count} state={history.state.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
