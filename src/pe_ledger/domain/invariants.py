"""Account invariant verification after each applied record."""

import logging

from src.pe_ledger.domain.models import Account

logger = logging.getLogger(__name__)


def verify_account_invariants(account: Account) -> None:
    """Verify balance invariants for one account. Raises AssertionError if violated.

    - available >= 0
    - held >= 0
    """
    assert account.available >= 0, (
        f"negative available balance: client={account.client}, available={account.available}"
    )
    assert account.held >= 0, (
        f"negative held balance: client={account.client}, held={account.held}"
    )

    logger.debug(
        "Invariants OK: client=%d, available=%d, held=%d, locked=%s",
        account.client,
        account.available,
        account.held,
        account.locked,
    )
