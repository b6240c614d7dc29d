from unittest import TestCase
from nftledger.db.driver import ContractDriver, InMemDriver
from nftledger.events import EventLog
from nftledger.token.state import TokenState

ALICE = 'alice'
BOB = 'bob'
CHARLIE = 'charlie'
DAVE = 'dave'


class TokenStateTestCase(TestCase):
    """Gives every test its own driver, event log and state so nothing leaks between tests."""
    def setUp(self):
        self.driver = ContractDriver(driver=InMemDriver())
        self.events = EventLog()
        self.state = TokenState(self.driver, self.events, contract='testtoken')

    def tearDown(self):
        self.driver.flush()
        self.events.flush()

    def event_names(self):
        return [e['event'] for e in self.events.pending]
