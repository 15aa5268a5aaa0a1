from backend.engine.reveal.scheduler import PolledScheduler
from backend.engine.reveal.sequence import RevealSequence

__all__ = ["PolledScheduler", "RevealSequence"]
