from event_emitter.lib.emitter_config import EmitterConfig
from event_emitter.lib.events import WILDCARD, EventEmitter, WildcardEvent
from event_emitter.lib.logger import configure_logger
from event_emitter.version import __version__

PACKAGE = __package__
VERSION = __version__

__all__ = [
    "VERSION",
    "PACKAGE",
    "WILDCARD",
    EmitterConfig.__name__,
    EventEmitter.__name__,
    WildcardEvent.__name__,
    configure_logger.__name__,
]
