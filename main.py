import argparse
import logging
import sys

from tetris_catalog import BrickCatalog
from tetris_config import CONFIG
from tetris_engine import TetrisEngine
from tetris_fsm import Phase

log = logging.getLogger("tetris")


def game_loop(engine, view):
    """Poll, dispatch at most one action, tick once, draw. Until terminated."""
    while engine.phase is not Phase.TERMINATED:
        event = view.poll()
        if event is not None:
            action, hold = event
            engine.submit_action(action, hold)
        info = engine.update_current_state()
        view.draw(info, engine.phase)
    return engine.snapshot()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Brick game Tetris")
    parser.add_argument("--ui", choices=("terminal", "window"), default="terminal",
                        help="curses terminal (default) or pygame window")
    parser.add_argument("--seed", type=int, default=CONFIG["SEED"],
                        help="seed for the brick randomizer")
    parser.add_argument("--custom-bricks", action="store_true", default=CONFIG["CUSTOM_BRICKS"],
                        help="add the oversized custom bricks before the first spawn")
    parser.add_argument("--highscore-file", default=CONFIG["HIGHSCORE_FILE"])
    parser.add_argument("--log-file", default=CONFIG["LOG_FILE"],
                        help="write logs here (the terminal belongs to the game)")
    parser.add_argument("--log-level", default=CONFIG["LOG_LEVEL"],
                        choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    return parser.parse_args(argv)


def setup_logging(log_file, level):
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=getattr(logging, level),
            format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        )
    else:
        logging.getLogger().addHandler(logging.NullHandler())


def main(argv=None):
    args = parse_args(argv)
    CONFIG.update({
        "SEED": args.seed,
        "CUSTOM_BRICKS": args.custom_bricks,
        "HIGHSCORE_FILE": args.highscore_file,
        "LOG_FILE": args.log_file,
        "LOG_LEVEL": args.log_level,
    })
    setup_logging(args.log_file, args.log_level)

    engine = None
    try:
        engine = TetrisEngine(BrickCatalog.standard(args.seed), highscore_file=args.highscore_file)
        if args.custom_bricks:
            engine.enable_custom_bricks()
        if args.ui == "window":
            from tetris_render import run_window
            info = run_window(engine, game_loop)
        else:
            from tetris_cli import run_terminal
            info = run_terminal(engine, game_loop)
    except MemoryError:
        log.critical("out of memory, giving up")
        print("tetris: cannot allocate memory", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        if engine is None:
            return 130
        engine.terminate()
        info = engine.snapshot()

    print(f"score: {info.score}  high score: {info.high_score}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
