"""Messages consumed by the interaction state machine."""

from dataclasses import dataclass

from wdym.exceptions import ProviderLookupError
from wdym.models import LookupResult, SearchConfig


@dataclass(frozen=True)
class QueryReceived:
    """A query is ready to be looked up."""

    config: SearchConfig


@dataclass(frozen=True)
class Searching:
    """Run the provider for this query."""

    config: SearchConfig


@dataclass(frozen=True)
class ResultReceived:
    """The provider answered."""

    result: LookupResult


@dataclass(frozen=True)
class LookupFailed:
    """The provider raised; the run ends with this error."""

    error: ProviderLookupError


@dataclass(frozen=True)
class Quit:
    """The user asked to leave."""

    pass


Message = QueryReceived | Searching | ResultReceived | LookupFailed | Quit
