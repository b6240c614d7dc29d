from nftledger.logger import get_logger

EVENT_MINT = 'Mint'
EVENT_TRANSFER = 'Transfer'
EVENT_APPROVAL = 'Approval'


class EventLog:
    """
    Append-only notification channel. Events emitted during an invocation stay pending
    until the invocation commits, and are dropped if it rolls back. Committed events are
    never rewritten; consumers read them and nothing is acknowledged back.
    """
    def __init__(self):
        self.pending = []
        self.committed = []
        self.log = get_logger('Events')

    def emit(self, name, contract, data: dict):
        event = {
            'event': name,
            'contract': contract,
            'data': dict(data)
        }
        self.pending.append(event)
        return event

    def commit(self):
        self.committed.extend(self.pending)
        self.pending = []

    def rollback(self):
        if self.pending:
            self.log.debug('Dropping {} pending events'.format(len(self.pending)))
        self.pending = []

    def flush(self):
        self.pending = []
        self.committed = []

    def of(self, name):
        return [e for e in self.committed if e['event'] == name]

    def __len__(self):
        return len(self.committed)

    def __iter__(self):
        return iter(self.committed)
