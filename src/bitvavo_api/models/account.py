"""
Account-related models for the Bitvavo client.

Immutable data structures for fees, balances, deposits and withdrawals.
"""

from dataclasses import dataclass
from typing import Optional

from ..codec import WireEnum


class DepositStatus(WireEnum):
    """Status of a deposit."""
    COMPLETED = "completed"
    CANCELED = "canceled"


class WithdrawalStatus(WireEnum):
    """Lifecycle state of a withdrawal."""
    AWAITING_PROCESSING = "awaiting_processing"
    AWAITING_EMAIL_CONFIRMATION = "awaiting_email_confirmation"
    AWAITING_BITVAVO_INSPECTION = "awaiting_bitvavo_inspection"
    APPROVED = "approved"
    SENDING = "sending"
    IN_MEMPOOL = "in_mempool"
    PROCESSED = "processed"
    COMPLETED = "completed"
    CANCELED = "canceled"


@dataclass(frozen=True)
class AccountFees:
    """Fee schedule in use for an account."""
    taker: str
    maker: str
    volume: str  # 30-day trading volume


@dataclass(frozen=True)
class Account:
    """Account information."""
    fees: AccountFees


@dataclass(frozen=True)
class Balance:
    """Balance of an account in one asset."""
    symbol: str
    available: str
    in_order: str


@dataclass(frozen=True)
class Fees:
    """Fee tier charged for a market on an account."""
    tier: int
    volume: str
    taker: str
    maker: str


@dataclass(frozen=True)
class DepositInfo:
    """Where to send funds to deposit an asset."""
    address: str
    payment_id: Optional[str] = None


@dataclass(frozen=True)
class Deposit:
    """Deposit history entry."""
    timestamp: int
    symbol: str
    amount: str
    fee: str
    status: DepositStatus
    tx_id: Optional[str] = None
    address: Optional[str] = None
    payment_id: Optional[str] = None


@dataclass(frozen=True)
class Withdrawal:
    """Withdrawal history entry."""
    timestamp: int
    symbol: str
    amount: str
    fee: str
    status: WithdrawalStatus
    address: Optional[str] = None
    payment_id: Optional[str] = None
    tx_id: Optional[str] = None


@dataclass(frozen=True)
class WithdrawOrder:
    """Request to withdraw funds to an external address."""
    symbol: str
    amount: str
    address: str
    payment_id: Optional[str] = None
    internal: bool = False
    add_withdrawal_fee: bool = False


@dataclass(frozen=True)
class WithdrawalOrderResponse:
    """Acknowledgement of a withdrawal request."""
    success: bool
    symbol: str
    amount: str
