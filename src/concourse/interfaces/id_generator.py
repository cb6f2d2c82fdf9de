"""Interface for ID generators."""

import abc

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Contract for a generator of unique string identifiers.

    Providers use it to label the records they create (baggage tags,
    passenger ids) without knowing how the ids are produced.
    """

    @abc.abstractmethod
    def new_id(self) -> str:
        """Return a new identifier, unique for the lifetime of the generator."""
