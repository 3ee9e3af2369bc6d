from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple, Union

from .errors import (
    DuplicateContributor,
    EmptyLedger,
    InvalidAmount,
    InvalidParticipantCount,
)
from .money import Cents


@dataclass(frozen=True)
class Named:
    name: str

    @property
    def size(self) -> int:
        return 1

    def identifier(self) -> str:
        return self.name


@dataclass(frozen=True)
class AnonymousGroup:
    """Everyone declared with ``-p`` beyond the payers. They all paid zero."""

    count: int

    @property
    def size(self) -> int:
        return self.count

    def identifier(self) -> str:
        if self.count == 1:
            return "Outra pessoa"
        return f"Outras {self.count} pessoas"


@dataclass(frozen=True)
class AnonymousMember:
    """One individual of an AnonymousGroup, only produced by the fan-out."""

    group_count: int
    index: int

    @property
    def size(self) -> int:
        return 1

    def identifier(self) -> str:
        return f"Pessoa {self.index + 1} de {self.group_count}"


Identity = Union[Named, AnonymousGroup, AnonymousMember]


def canonical_name(name: str) -> str:
    return name.strip().casefold()


@dataclass(frozen=True)
class Contribution:
    name: str
    amount_cents: Cents


@dataclass(frozen=True)
class Ledger:
    contributions: Tuple[Contribution, ...]
    participant_count: Optional[int] = None

    def __post_init__(self):
        contributions = tuple(
            c if isinstance(c, Contribution) else Contribution(*c)
            for c in self.contributions
        )
        object.__setattr__(self, "contributions", contributions)

        if not contributions:
            raise EmptyLedger()

        seen = set()
        for c in contributions:
            if isinstance(c.amount_cents, bool) or not isinstance(c.amount_cents, int):
                raise InvalidAmount(c.amount_cents)
            if c.amount_cents < 0:
                raise InvalidAmount(c.amount_cents, "valor negativo")
            key = canonical_name(c.name)
            if key in seen:
                raise DuplicateContributor(c.name)
            seen.add(key)

        count = self.participant_count
        if count is None:
            object.__setattr__(self, "participant_count", len(contributions))
        elif isinstance(count, bool) or not isinstance(count, int):
            raise InvalidParticipantCount(
                len(contributions), count, f"número de pessoas inválido: {count}"
            )
        elif self.participant_count < len(contributions):
            raise InvalidParticipantCount(len(contributions), self.participant_count)

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[Tuple[str, Cents]], participant_count: Optional[int] = None
    ) -> "Ledger":
        return cls(tuple(Contribution(n, a) for n, a in pairs), participant_count)

    @property
    def contributor_count(self) -> int:
        return len(self.contributions)

    @property
    def anonymous_count(self) -> int:
        return self.participant_count - self.contributor_count

    @property
    def total_cents(self) -> Cents:
        return sum(c.amount_cents for c in self.contributions)


@dataclass(frozen=True)
class Balance:
    """Signed position of one identity. ``net > 0`` is owed money.

    For an AnonymousGroup, ``paid``/``share``/``net`` are per person; the
    aggregate is ``net * who.size``.
    """

    who: Identity
    paid: Cents
    share: Cents
    net: Cents = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "net", self.paid - self.share)

    @property
    def aggregate_net(self) -> Cents:
        return self.net * self.who.size


@dataclass(frozen=True)
class Transfer:
    sender: Identity
    receiver: Identity
    amount_cents: Cents
