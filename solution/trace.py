"""Opt-in structured trace of a balancing run."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

logger = logging.getLogger(__name__)


@dataclass
class SearchTrace:
    """
    Collects search events for one balancing call.

    Pass a fresh instance to LineBalancer.balance() to inspect how the result
    was reached. Each event is a dict with an "event" key plus event fields.

    Attributes:
        events: Recorded events in order
        record_candidates: Also record one event per accepted candidate
    """
    events: List[Dict[str, Any]] = field(default_factory=list)
    record_candidates: bool = True

    def record(self, event: str, **fields: Any) -> None:
        """Append an event and mirror it to the debug log."""
        if event == "candidate" and not self.record_candidates:
            return
        entry = {"event": event}
        entry.update(fields)
        self.events.append(entry)
        logger.debug("%s %s", event, fields)

    def get_events(self, event: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["event"] == event]

    def candidate_scores(self) -> List[Dict[str, Any]]:
        """Balance rate and variance of every recorded candidate."""
        return [
            {"balance_rate": e["balance_rate"], "variance": e["variance"],
             "station_count": e["station_count"]}
            for e in self.get_events("candidate")
        ]

    def __len__(self) -> int:
        return len(self.events)
