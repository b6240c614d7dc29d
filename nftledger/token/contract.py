from nftledger.token.state import TokenState
from nftledger.token.ledger import Ledger, validate_token_id
from nftledger.token.access import AccessControl
from nftledger.token.approvals import ApprovalRegistry
from nftledger.token.mint import MintEngine
from nftledger.token.transfer import TransferEngine
from nftledger.logger import get_logger

log = get_logger('NFToken')


class NFToken:
    """
    Public surface of the non-fungible token ledger.

    Every mutating operation takes the trusted caller identity as its first argument.
    Business-rule rejections (wrong owner, unknown token, non-owner mint) return False and
    write nothing. Exceptions only escape for invariant violations and malformed input;
    the executor aborts the whole invocation when that happens.

    Invariants kept by this implementation:
    - minting `value` tokens creates exactly `value` ownership records, so the sum of all
      balances always equals total_minted()
    - a transfer never clears the token's approval; a delegate approved by a previous
      owner can still move the token until the current owner revokes or overwrites it
    """
    EXPORTS = {
        'deploy',
        'is_approved',
        'total_minted',
        'balance_of',
        'owner_of',
        'get_approved',
        'transfer',
        'transfer_from',
        'mint',
        'approval',
    }

    READ_ONLY = {
        'is_approved',
        'total_minted',
        'balance_of',
        'owner_of',
        'get_approved',
    }

    def __init__(self, state: TokenState):
        self.state = state

        self.ledger = Ledger(state)
        self.access = AccessControl(state)
        self.approvals = ApprovalRegistry(state, self.ledger)
        self.minter = MintEngine(state, self.ledger)
        self.transfers = TransferEngine(state, self.ledger, self.approvals)

    @property
    def contract(self):
        return self.state.contract

    def deploy(self, caller, init_value=0):
        self.access.init_owner(caller)
        self.state.total_minted.set(0)

        if init_value != 0:
            self.minter.mint(caller, init_value)

        log.info('Deployed {} for owner {} with {} initial tokens'.format(self.contract, caller, init_value))

    # Reads

    def is_approved(self, token_id, approved) -> bool:
        return self.approvals.is_approved(token_id, approved)

    def total_minted(self) -> int:
        return self.state.total_minted.get()

    def balance_of(self, owner) -> int:
        return self.ledger.get_balance(owner)

    def owner_of(self, token_id):
        return self.ledger.get_owner(token_id)

    def get_approved(self, token_id):
        return self.approvals.get_approved(token_id)

    # Mutations

    def transfer(self, caller, to, token_id) -> bool:
        return self.transfers.transfer(caller, to, validate_token_id(token_id))

    def transfer_from(self, caller, to, token_id) -> bool:
        return self.transfers.transfer_from(caller, to, validate_token_id(token_id))

    def mint(self, caller, to, value) -> bool:
        if not self.access.is_contract_owner(caller):
            log.debug('Mint rejected: {} is not the contract owner'.format(caller))
            return False

        return self.minter.mint(to, value)

    def approval(self, caller, to, token_id, approved) -> bool:
        return self.approvals.approval(caller, to, validate_token_id(token_id), bool(approved))
