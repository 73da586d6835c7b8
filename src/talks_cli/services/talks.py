"""
Talk listing and submission.

These functions hold the behaviour of the two commands; the CLI layer only
parses flags, runs them and prints what they return.
"""

from dataclasses import dataclass
from typing import Iterable, List
import logging

from ..core.client import HttpResponse, TalksClient
from ..core.errors import MissingFieldError
from ..core.models import Talk, filter_by_type, sort_by_type

logger = logging.getLogger(__name__)

MISSING_FIELD_MESSAGE = "Error: One of the three fields is null. Exiting..."


@dataclass(frozen=True)
class SubmitOptions:
    """Flags given to the submit command."""
    name: str = ""
    type: str = ""
    desc: str = ""

    def missing_fields(self) -> List[str]:
        return [field for field in ("name", "type", "desc") if not getattr(self, field)]

    def to_talk(self) -> Talk:
        # id and hidden are owned by the registry
        return Talk(name=self.name, type=self.type, desc=self.desc)


@dataclass
class SubmitResult:
    """Outcome of a submission."""
    talk: Talk
    response: HttpResponse

    @property
    def accepted(self) -> bool:
        return self.response.ok


async def list_talks(client: TalksClient, type_filter: str = "") -> List[Talk]:
    """
    Fetch visible talks and put them in display order.

    With a filter, only talks of exactly that type are kept, in the order the
    registry returned them. Without one, all talks are sorted by type.

    Args:
        client: Registry client
        type_filter: Category to keep, empty for all

    Returns:
        Talks in display order
    """
    talks = await client.fetch_visible_talks()

    if type_filter:
        selected = filter_by_type(talks, type_filter)
        logger.debug(f"Filter '{type_filter}' kept {len(selected)} of {len(talks)} talk(s)")
        return selected

    return sort_by_type(talks)


def render_talks(talks: Iterable[Talk]) -> List[str]:
    """Build the summary line followed by one line per talk."""
    talks = list(talks)
    lines = [f"There are currently {len(talks)} talks scheduled"]
    lines.extend(talk.display_line() for talk in talks)
    return lines


async def submit_talk(client: TalksClient, options: SubmitOptions) -> SubmitResult:
    """
    Validate the submit flags and post the new talk.

    Raises:
        MissingFieldError: If name, type or desc is empty; nothing is sent
    """
    missing = options.missing_fields()
    if missing:
        raise MissingFieldError(fields=missing)

    talk = options.to_talk()
    response = await client.post_talk(talk)
    logger.debug(f"Submission answered with HTTP {response.status}")
    return SubmitResult(talk=talk, response=response)
