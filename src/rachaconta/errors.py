from typing import Optional


class SettlementError(ValueError):
    """Base class for input errors that abort a settlement."""


class EmptyLedger(SettlementError):
    def __init__(self):
        super().__init__("nenhum pagamento informado")


class InvalidAmount(SettlementError):
    def __init__(self, value, reason: str = "número inválido"):
        self.value = value
        super().__init__(f"{reason}: {value}")


class InvalidParticipantCount(SettlementError):
    def __init__(self, contributors: int, participants, reason: Optional[str] = None):
        self.contributors = contributors
        self.participants = participants
        super().__init__(
            reason
            or f"a conta não fecha! {contributors} pessoa(s) pagaram, "
            f"mas você informou apenas {participants} pessoa(s) no total."
        )


class DuplicateContributor(SettlementError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"pessoa informada mais de uma vez: {name}")
