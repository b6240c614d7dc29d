from nftledger.token.state import TokenState
from nftledger.token.ledger import Ledger
from nftledger.token.approvals import ApprovalRegistry
from nftledger.events import EVENT_TRANSFER
from nftledger.logger import get_logger

log = get_logger('Transfers')


class TransferEngine:
    def __init__(self, state: TokenState, ledger: Ledger, approvals: ApprovalRegistry):
        self.state = state
        self.ledger = ledger
        self.approvals = approvals

    def is_owner(self, identity, token_id) -> bool:
        owner = self.ledger.get_owner(token_id)
        if owner is None:
            return False
        return owner == identity

    def transfer_impl(self, sender, to, token_id) -> bool:
        if not self.is_owner(sender, token_id):
            return False

        # The approval entry is left untouched
        self.ledger.move(sender, to, token_id)
        self.state.emit(EVENT_TRANSFER, **{'from': sender, 'to': to, 'token_id': token_id})
        return True

    def transfer(self, caller, to, token_id) -> bool:
        if self.transfer_impl(caller, to, token_id):
            return True

        log.debug('Transfer rejected: {} does not own token {}'.format(caller, token_id))
        return False

    def transfer_from(self, caller, to, token_id) -> bool:
        # Owner path first; the delegate path is only considered for non-owners
        if self.is_owner(caller, token_id):
            return self.transfer_impl(caller, to, token_id)

        if not self.approvals.is_approved(token_id, caller):
            log.debug('Transfer rejected: {} is neither owner nor delegate of token {}'.format(caller, token_id))
            return False

        return self.transfer_impl(self.ledger.get_owner(token_id), to, token_id)
