from unittest import TestCase
from nftledger.client import NFTokenClient
from nftledger.db.driver import ContractDriver
import random

IDENTITIES = ['alice', 'bob', 'charlie', 'dave', 'eve']


class TestLedgerInvariants(TestCase):
    """Drives random operation sequences and checks the bookkeeping invariants after each step."""
    def setUp(self):
        self.client = NFTokenClient(signer='alice', driver=ContractDriver())
        self.token = self.client.deploy(init_value=20)
        self.rng = random.Random(1337)

    def tearDown(self):
        self.client.flush()

    def owners(self):
        total = self.token.total_minted()
        return {i: self.token.owner_of(token_id=i) for i in range(1, total + 1)}

    def check_invariants(self):
        owners = self.owners()

        # every minted id has an owner and nothing beyond total_minted does
        self.assertNotIn(None, owners.values())
        self.assertIsNone(self.token.owner_of(token_id=len(owners) + 1))
        self.assertIsNone(self.token.owner_of(token_id=0))

        for identity in IDENTITIES:
            held = len([o for o in owners.values() if o == identity])
            self.assertEqual(self.token.balance_of(owner=identity), held)

        self.assertEqual(sum(self.token.balance_of(owner=i) for i in IDENTITIES), self.token.total_minted())

    def random_step(self):
        caller = self.rng.choice(IDENTITIES)
        other = self.rng.choice(IDENTITIES)
        token_id = self.rng.randint(1, self.token.total_minted() + 2)
        op = self.rng.choice(['transfer', 'transfer_from', 'approve', 'revoke', 'mint'])

        before = self.owners()
        owner = before.get(token_id)
        delegate = self.token.get_approved(token_id=token_id)

        if op == 'transfer':
            ok = self.token.transfer(to=other, token_id=token_id, signer=caller)
            self.assertEqual(ok, owner == caller)
        elif op == 'transfer_from':
            ok = self.token.transfer_from(to=other, token_id=token_id, signer=caller)
            self.assertEqual(ok, owner is not None and (owner == caller or delegate == caller))
        elif op == 'approve':
            ok = self.token.approval(to=other, token_id=token_id, approved=True, signer=caller)
            self.assertEqual(ok, owner == caller)
            if ok:
                self.assertTrue(self.token.is_approved(token_id=token_id, approved=other))
        elif op == 'revoke':
            ok = self.token.approval(to=other, token_id=token_id, approved=False, signer=caller)
            self.assertEqual(ok, owner == caller and delegate is not None)
            if ok and delegate == other:
                self.assertFalse(self.token.is_approved(token_id=token_id, approved=other))
            else:
                self.assertEqual(self.token.get_approved(token_id=token_id), delegate)
        else:
            amount = self.rng.randint(0, 3)
            ok = self.token.mint(to=other, value=amount, signer=caller)
            self.assertEqual(ok, caller == 'alice')

        if op in ('transfer', 'transfer_from'):
            after = self.owners()
            if ok:
                self.assertEqual(after[token_id], other)
            else:
                self.assertEqual(after, before)

    def test_random_operations_keep_invariants(self):
        self.check_invariants()

        for _ in range(150):
            self.random_step()
            self.check_invariants()
