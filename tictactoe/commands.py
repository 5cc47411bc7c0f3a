import json

from .game_logic import GameError
from .logging_config import get_logger

log = get_logger(__name__)

MALFORMED_REQUEST = "Malformed request"


class CommandError(Exception):
    """
    command rejected; str(err) is the message shown to the player
    """


def _make_move(engine, position):
    return engine.apply_move(position)


def _get_game_state(engine):
    return engine.get_state()


def _reset_game(engine):
    return engine.reset()


# name -> (handler, argument names)
COMMANDS = {
    "make_move": (_make_move, ("position",)),
    "get_game_state": (_get_game_state, ()),
    "reset_game": (_reset_game, ()),
}


class CommandBridge:
    """
    name based request/response calls from the ui into one engine.
    the engine is passed in, the bridge never creates its own.
    """
    def __init__(self, engine):
        self.engine = engine

    def invoke(self, command, /, **args):
        """
        run a command by name, returns the snapshot as a dict
        raises CommandError with a player facing message
        """
        entry = COMMANDS.get(command)
        if entry is None:
            log.warning("unknown_command", command=command)
            raise CommandError(f"Unknown command: {command}")
        handler, params = entry
        if set(args) != set(params):
            log.warning("bad_arguments", command=command, args=sorted(args))
            raise CommandError(f"Invalid arguments for {command}")

        log.debug("invoke", command=command, **args)
        try:
            state = handler(self.engine, **args)
        except GameError as e:
            raise CommandError(str(e)) from e
        return state.to_dict()

    def handle_message(self, raw):
        """
        json in, json out:
          {"cmd": "make_move", "args": {"position": 4}}
          -> {"ok": true, "data": {...}} or {"ok": false, "error": "..."}
        """
        try:
            request = json.loads(raw)
            command = request["cmd"]
            args = request.get("args", {})
            if args is None:
                args = {}
            if not isinstance(command, str) or not isinstance(args, dict):
                raise ValueError(raw)
        except (ValueError, KeyError, TypeError, AttributeError):
            log.warning("malformed_request", raw=raw)
            return json.dumps({"ok": False, "error": MALFORMED_REQUEST})

        try:
            data = self.invoke(command, **args)
        except CommandError as e:
            return json.dumps({"ok": False, "error": str(e)})
        return json.dumps({"ok": True, "data": data})
