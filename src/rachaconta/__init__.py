__version__ = "0.1.0"

from .balances import compute_balances
from .errors import (
    DuplicateContributor,
    EmptyLedger,
    InvalidAmount,
    InvalidParticipantCount,
    SettlementError,
)
from .models import (
    AnonymousGroup,
    AnonymousMember,
    Balance,
    Contribution,
    Ledger,
    Named,
    Transfer,
)
from .settlement import check_settlement, compute_transfers, expand_group_transfers
