"""Phases, user actions and the (phase, action) routing table"""
from enum import Enum


class Phase(Enum):
    READY = "ready"
    SPAWN = "spawn"
    MOVING = "moving"
    ATTACH = "attach"
    GAMEOVER = "gameover"
    PAUSED = "paused"
    TERMINATED = "terminated"


class Action(Enum):
    START = "start"
    PAUSE = "pause"
    TERMINATE = "terminate"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    ACTION = "action"


def _call(name):
    return lambda engine, hold: getattr(engine, name)()


def _move(name):
    return lambda engine, hold: getattr(engine, name)(hold)


TRANSITIONS = {
    Phase.READY: {
        Action.START: _call("start"),
        Action.TERMINATE: _call("terminate"),
    },
    Phase.SPAWN: {
        Action.PAUSE: _call("pause"),
        Action.TERMINATE: _call("terminate"),
    },
    Phase.MOVING: {
        Action.LEFT: _move("left"),
        Action.RIGHT: _move("right"),
        Action.UP: _move("up"),
        Action.DOWN: _move("down"),
        Action.ACTION: _move("action"),
        Action.PAUSE: _call("pause"),
        Action.TERMINATE: _call("terminate"),
    },
    Phase.PAUSED: {
        Action.START: _call("pause"),
        Action.PAUSE: _call("pause"),
        Action.TERMINATE: _call("terminate"),
    },
    Phase.GAMEOVER: {
        Action.START: _call("start"),
        Action.TERMINATE: _call("terminate"),
    },
    Phase.ATTACH: {},
    Phase.TERMINATED: {},
}


def dispatch(engine, action: Action, hold: bool = False) -> bool:
    """Route an action to the engine. Returns False when the phase ignores it."""
    handler = TRANSITIONS.get(engine.phase, {}).get(action)
    if handler is None:
        return False
    handler(engine, hold)
    return True
