from nftledger.token.state import TokenState
from nftledger.token.ledger import Ledger, validate_token_id, validate_identity
from nftledger.events import EVENT_APPROVAL
from nftledger.logger import get_logger

log = get_logger('Approvals')


class ApprovalRegistry:
    """
    Per-token delegate authorization. Each token id is either unapproved (no entry) or
    approved to exactly one delegate.

        Unapproved    --grant(d)-->    ApprovedTo(d)
        ApprovedTo(d) --grant(d2)-->   ApprovedTo(d2)
        ApprovedTo(d) --revoke(d)-->   Unapproved
        ApprovedTo(d) --revoke(d2)-->  ApprovedTo(d), still reported as success

    Entries are keyed by token id only and are not touched when the token changes hands:
    a delegate approved by a previous owner stays approved under the new owner until that
    owner overwrites or revokes it.
    """
    def __init__(self, state: TokenState, ledger: Ledger):
        self.state = state
        self.ledger = ledger

    def get_approved(self, token_id):
        return self.state.approvals[validate_token_id(token_id)]

    def is_approved(self, token_id, candidate) -> bool:
        approved = self.get_approved(token_id)
        if approved is None:
            return False
        return approved == candidate

    def approval(self, caller, delegate, token_id, approved: bool) -> bool:
        token_owner = self.ledger.get_owner(token_id)
        if token_owner is None:
            log.debug('Approval rejected: token {} has not been minted'.format(token_id))
            return False

        if token_owner != caller:
            log.debug('Approval rejected: {} does not own token {}'.format(caller, token_id))
            return False

        existing = self.get_approved(token_id)

        if existing is None:
            # Nothing to revoke
            if not approved:
                return False
            self.state.approvals[token_id] = validate_identity(delegate)

        else:
            if existing == delegate and not approved:
                del self.state.approvals[token_id]

            if approved:
                self.state.approvals[token_id] = validate_identity(delegate)

        self.state.emit(EVENT_APPROVAL, owner=caller, spender=delegate, token_id=token_id, approved=approved)
        return True
